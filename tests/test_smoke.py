"""
Smoke tests — verify the bootstrap is healthy.

These tests ensure the basic scaffolding works:
- Package imports successfully
- CLI entrypoint responds
- Version is set
"""

from click.testing import CliRunner

from sitebundle import __version__
from sitebundle.main import cli


class TestBootstrap:
    """Verify the project bootstrap is healthy."""

    def test_version_is_set(self):
        assert __version__
        assert isinstance(__version__, str)

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_commands_registered(self):
        assert {"build", "resolve", "clean", "config"} <= set(cli.commands)

    def test_core_package_imports(self):
        """Core sub-packages should be importable."""
        import sitebundle.adapters
        import sitebundle.core.config.loader
        import sitebundle.core.models
        import sitebundle.core.observability.logging_config
        import sitebundle.core.services.entry_points
        import sitebundle.core.services.generators.entry_point
        import sitebundle.core.use_cases.build
