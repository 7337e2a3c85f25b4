"""
Entry-point generator — turn resolved packages into bundler source.

Output shape (TypeScript, consumed by the bundler as an entry)::

    import server from "@frontity/core/src/server";
    import my$2d$theme$$default from "my-theme/src/server";

    const packages = {
      my$2d$theme$$default,
    };

    export default server({ packages });

Development client bundles additionally get a hot-module-reload block
that re-requires every package and re-enters the client runtime.

The output is a pure function of its inputs; downstream caching keys
off file content, so formatting changes are breaking changes.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from sitebundle.core.models.settings import DEFAULT_RUNTIME
from sitebundle.core.models.site import ResolvedPackage

# Separator between the encoded name and mode. Never produced by
# _encode(): escapes always carry at least one hex digit.
_SEPARATOR = "$$"


def _is_literal(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def _encode(text: str, *, leading: bool) -> str:
    """Escape everything outside ``[A-Za-z0-9_]`` as ``$<hex>$``.

    With ``leading`` set, a digit in first position is escaped too so
    the result can start an identifier.
    """
    out = []
    for i, ch in enumerate(text):
        if _is_literal(ch) and not (leading and i == 0 and ch.isdigit()):
            out.append(ch)
        else:
            out.append(f"${ord(ch):x}$")
    return "".join(out)


def variable_name(name: str, mode: str) -> str:
    """Derive the binding identifier for a package under a mode.

    The mapping is injective: distinct ``(name, mode)`` pairs always
    produce distinct identifiers, and every result is a valid
    JavaScript identifier.

        >>> variable_name("@frontity/mars-theme", "default")
        '$40$frontity$2f$mars$2d$theme$$default'
    """
    return f"{_encode(name, leading=True)}{_SEPARATOR}{_encode(mode, leading=False)}"


def _literal(value: str) -> str:
    """Quote a module reference as a JS string literal."""
    return json.dumps(value)


def runtime_entry(type_: str, runtime: str = DEFAULT_RUNTIME) -> str:
    """Module reference of the runtime entry function for ``type_``."""
    return f"{runtime}/src/{type_}"


def generate_imports(
    packages: Sequence[ResolvedPackage],
    type_: str,
    *,
    runtime: str = DEFAULT_RUNTIME,
) -> str:
    """Generate the imports, registry and default export section.

    Args:
        packages: Resolved packages, in import order.
        type_: Bundle type; also the name of the runtime entry binding.
        runtime: Module prefix of the rendering runtime.

    Returns:
        Source text ending with a blank line.
    """
    lines = [f"import {type_} from {_literal(runtime_entry(type_, runtime))};"]
    for pkg in packages:
        lines.append(f"import {variable_name(pkg.name, pkg.mode)} from {_literal(pkg.path)};")

    lines.append("")
    lines.append("const packages = {")
    for pkg in packages:
        lines.append(f"  {variable_name(pkg.name, pkg.mode)},")
    lines.append("};")
    lines.append("")
    lines.append(f"export default {type_}({{ packages }});")

    return "\n".join(lines) + "\n\n"


def generate_hot_reload(
    template: str,
    packages: Sequence[ResolvedPackage],
    *,
    runtime: str = DEFAULT_RUNTIME,
) -> str:
    """Append the hot-module-reload acceptance block to ``template``.

    The watched dependencies are the client runtime entry plus every
    package path. On change, everything is re-required and the client
    runtime is re-entered with ``isHmr: true``.
    """
    client_entry = _literal(runtime_entry("client", runtime))

    lines = [
        'if (module["hot"]) {',
        '  module["hot"].accept(',
        "    [",
        f"      {client_entry},",
    ]
    for pkg in packages:
        lines.append(f"      {_literal(pkg.path)},")
    lines += [
        "    ],",
        "    () => {",
        f"      const client = require({client_entry}).default;",
    ]
    for pkg in packages:
        lines.append(
            f"      const {variable_name(pkg.name, pkg.mode)} = require({_literal(pkg.path)}).default;"
        )
    lines.append("      const packages = {")
    for pkg in packages:
        lines.append(f"        {variable_name(pkg.name, pkg.mode)},")
    lines += [
        "      };",
        "      client({ packages, isHmr: true });",
        "    }",
        "  );",
        "}",
    ]

    return template + "\n".join(lines) + "\n"
