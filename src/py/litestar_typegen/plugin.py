"""Litestar plugin wiring type generation into an application."""

import logging
from typing import TYPE_CHECKING

from litestar.plugins import CLIPlugin, InitPluginProtocol

if TYPE_CHECKING:
    from click import Group
    from litestar import Litestar
    from litestar.config.app import AppConfig

    from litestar_typegen.codegen import ExportResult
    from litestar_typegen.config import StaticAssetConfig, TypeGenConfig

logger = logging.getLogger("litestar_typegen")


class TypeGenPlugin(InitPluginProtocol, CLIPlugin):
    """Type generation plugin for Litestar.

    This plugin provides:

    - The ``types`` CLI command group
    - Declaration export on application startup (``generate_on_startup``)
    - Optional serving of the built client bundle

    Example::

        from litestar import Litestar
        from litestar_typegen import TypeGenConfig, TypeGenPlugin

        app = Litestar(
            plugins=[TypeGenPlugin(config=TypeGenConfig(model_path=Path("build/types.json")))],
        )
    """

    __slots__ = ("_config", "_last_result", "_static_config")

    def __init__(
        self,
        config: "TypeGenConfig | None" = None,
        static_config: "StaticAssetConfig | None" = None,
    ) -> None:
        """Initialize the plugin.

        Args:
            config: Type generation configuration. Defaults to TypeGenConfig() if not provided.
            static_config: Optional configuration for serving the client bundle.
        """
        from litestar_typegen.config import TypeGenConfig

        if config is None:
            config = TypeGenConfig()
        self._config = config
        self._static_config = static_config
        self._last_result: "ExportResult | None" = None

    @property
    def config(self) -> "TypeGenConfig":
        """Get the type generation configuration.

        Returns:
            The TypeGenConfig instance.
        """
        return self._config

    @property
    def static_config(self) -> "StaticAssetConfig | None":
        """Get the static asset configuration.

        Returns:
            The StaticAssetConfig instance, or None when bundle serving is disabled.
        """
        return self._static_config

    @property
    def last_result(self) -> "ExportResult | None":
        """Result of the most recent startup export.

        Returns:
            The ExportResult, or None if no startup export has run.
        """
        return self._last_result

    def on_cli_init(self, cli: "Group") -> None:
        """Register CLI commands.

        Args:
            cli: The Click command group to add commands to.
        """
        from litestar_typegen.cli import typegen_group

        cli.add_command(typegen_group)

    def on_app_init(self, app_config: "AppConfig") -> "AppConfig":
        """Configure the Litestar application.

        Args:
            app_config: The Litestar application configuration.

        Returns:
            The modified application configuration.
        """
        if self._static_config is not None:
            from litestar_typegen.static import create_static_handler

            app_config.route_handlers.append(create_static_handler(self._static_config))

        if self._config.generate_on_startup:
            app_config.on_startup.append(self.export_on_startup)

        return app_config

    def export_on_startup(self, app: "Litestar") -> None:
        """Export the declarations; failures propagate and abort startup."""
        from litestar_typegen.codegen import export_from_config

        result = export_from_config(self._config)
        self._last_result = result
        if result.skipped:
            logger.debug("Type generation skipped for generator style %r", self._config.generator_style)
        elif result.exported_files:
            logger.info("Type declarations exported: %s", ", ".join(result.exported_files))
        else:
            logger.debug("Type declarations unchanged")
