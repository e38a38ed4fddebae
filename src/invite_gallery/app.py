"""Litestar application factory and CLI entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from litestar import Litestar, Router
from litestar.datastructures import State
from litestar.di import Provide
from litestar.logging.config import LoggingConfig
from litestar.static_files import create_static_files_router

from invite_gallery.clients.template_source import (
    FileTemplateSource,
    HttpTemplateSource,
    TemplateSource,
)
from invite_gallery.config import ConfigLoader, Settings
from invite_gallery.controllers.catalog import CatalogController
from invite_gallery.controllers.health import HealthController
from invite_gallery.controllers.public import PublicDataController
from invite_gallery.controllers.template_api import TemplateApiController
from invite_gallery.middleware.raw_templates import RawTemplateMiddleware
from invite_gallery.resources.catalog import CatalogResource
from invite_gallery.resources.health import HealthResource
from invite_gallery.resources.static_template import StaticTemplateResource
from invite_gallery.services.template_service import TemplateService
from invite_gallery.utils.logging import LoggingSetup

_STATIC_DIRS = ("templates", "images")


class AppFactory:
    """Builds and configures the Litestar application. All methods are static."""

    @staticmethod
    def _source(settings: Settings) -> TemplateSource:
        """HTTP source when data_url is set, otherwise public_dir/data.json."""
        if settings.data_url:
            return HttpTemplateSource(settings.data_url, timeout=settings.data_timeout)
        return FileTemplateSource(settings.data_path)

    @staticmethod
    def _build(settings: Settings) -> State:
        """Construct the full object graph once.

        source → template_service ─┬→ CatalogResource
                                   └→ HealthResource
        public_dir → StaticTemplateResource (route + dev middleware)
        """
        template_service = TemplateService(AppFactory._source(settings))
        catalog = CatalogResource(
            template_service=template_service,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
        )
        health_resource = HealthResource(template_service=template_service)
        static_templates = StaticTemplateResource(
            root_dir=settings.public_dir,
            expose_errors=not settings.is_production,
        )
        return State({
            "template_service": template_service,
            "catalog": catalog,
            "health": health_resource,
            "static_templates": static_templates,
            "data_path": settings.data_path,
            "preload_on_startup": settings.preload_on_startup,
        })

    @staticmethod
    @asynccontextmanager
    async def _lifespan(app: Litestar) -> AsyncIterator[None]:
        """Warm the template store on startup. Never blocks startup on failure."""
        if app.state.preload_on_startup:
            template_service: TemplateService = app.state.template_service
            await template_service.preload()
        yield

    @staticmethod
    def _static_routers(public_dir: Path) -> list[Router]:
        """Literal-path static serving for the public asset directories."""
        routers: list[Router] = []
        for name in _STATIC_DIRS:
            directory = public_dir / name
            if directory.is_dir():
                routers.append(create_static_files_router(
                    path=f"/{name}", directories=[directory], name=f"static-{name}",
                ))
        return routers

    @staticmethod
    def provide_catalog(state: State) -> CatalogResource:
        """Provide the pre-built CatalogResource from app state."""
        catalog: CatalogResource = state.catalog
        return catalog

    @staticmethod
    def provide_health(state: State) -> HealthResource:
        """Provide the pre-built HealthResource from app state."""
        health_resource: HealthResource = state.health
        return health_resource

    @staticmethod
    def provide_static_templates(state: State) -> StaticTemplateResource:
        """Provide the pre-built StaticTemplateResource from app state."""
        static_templates: StaticTemplateResource = state.static_templates
        return static_templates

    @staticmethod
    def create_app(settings: Settings | None = None) -> Litestar:
        """Create and configure the Litestar application."""
        if settings is None:
            settings = ConfigLoader.load_settings()
        LoggingSetup.configure(settings.log_level)
        state = AppFactory._build(settings)
        app = Litestar(
            route_handlers=[
                HealthController, CatalogController,
                TemplateApiController, PublicDataController,
                *AppFactory._static_routers(settings.public_dir),
            ],
            state=state,
            lifespan=[AppFactory._lifespan],
            logging_config=LoggingConfig(configure_root_logger=False),
            dependencies={
                "catalog": Provide(AppFactory.provide_catalog, sync_to_thread=False),
                "health_resource": Provide(AppFactory.provide_health, sync_to_thread=False),
                "static_templates": Provide(
                    AppFactory.provide_static_templates, sync_to_thread=False,
                ),
            },
        )
        if not settings.is_production:
            RawTemplateMiddleware.wrap(app, state.static_templates)
        return app


# Public alias so conftest / uvicorn can call create_app() without knowing AppFactory.
create_app = AppFactory.create_app


class CLI:
    """Command-line interface for invite-gallery."""

    @staticmethod
    def _build_parser() -> argparse.ArgumentParser:
        """Build the CLI argument parser."""
        parser = argparse.ArgumentParser(
            prog="invite-gallery", description="Invitation template gallery server",
        )
        subparsers = parser.add_subparsers(dest="command")

        run_parser = subparsers.add_parser("run", help="Start the server")
        run_parser.add_argument("--host", default="0.0.0.0")
        run_parser.add_argument("--port", type=int, default=8000)
        run_parser.add_argument("--reload", action="store_true", help="Auto-reload on file changes")

        return parser

    @staticmethod
    def main(argv: list[str] | None = None) -> None:
        """CLI entry point. Catches all exceptions and exits cleanly."""
        parser = CLI._build_parser()
        args = parser.parse_args(argv)

        if args.command is None:
            parser.print_help()
            sys.exit(1)

        try:
            if args.command == "run":
                import uvicorn

                uvicorn.run(
                    "invite_gallery.app:create_app",
                    factory=True,
                    host=args.host,
                    port=args.port,
                    reload=args.reload,
                )
        except KeyboardInterrupt:
            pass
        except Exception as error:
            print(f"Error: {error}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    CLI.main()
