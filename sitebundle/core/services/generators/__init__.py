"""
Generators — produce source text from resolved packages.

Each generator is a pure function: resolved packages in, text out.
Writing the result to disk is the caller's job.
"""
