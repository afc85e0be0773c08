"""
Discogs Metadata Extractor CLI Module
Command-line entry points: clipboard, URL, search and settings.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ..clients.discogs import DiscogsClient
from ..core.config import PROG_NAME, PROJECT_NAME, PROJECT_VERSION, ERROR_MESSAGES, SUCCESS_MESSAGES
from ..core.exceptions import ExtractorError
from ..core.logger import set_level, get_logger
from ..core.settings import Settings, SettingsStore
from ..core.validation import validate_and_raise, validate_settings
from ..services.artwork_fetcher import ArtworkFetcher
from ..services.extraction_pipeline import ExtractionPipeline, PipelineResult
from ..services.template_renderer import TemplateRenderer
from .clipboard import read_clipboard
from .display import DisplayManager
from .document import ConsoleSurface, NoteFileSurface

logger = get_logger("ui.cli")


class ExtractorCLI:
    """Main CLI class for the Discogs Metadata Extractor."""

    def __init__(self, display_manager: Optional[DisplayManager] = None):
        self.display_manager = display_manager or DisplayManager()

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROG_NAME,
            description=f"{PROJECT_NAME} v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s --note "notes/Animals.md" url https://www.discogs.com/release/249504
  %(prog)s --vault ~/Obsidian --note "music/Animals.md" clipboard
  %(prog)s search "Pink Floyd Animals"
  %(prog)s settings set api_key YOUR_KEY
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--vault',
            default='.',
            help='Vault root; the artwork folder is created below it (default: current directory)'
        )
        parser.add_argument(
            '--note', '-n',
            help='Note file to overwrite with the rendered metadata (default: print to the terminal)'
        )
        parser.add_argument(
            '--config',
            help='Settings file (default: ~/.config/discogs-extractor/settings.json)'
        )
        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Enable debug logging'
        )

        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available commands',
            required=True
        )

        subparsers.add_parser(
            'clipboard',
            help='Extract metadata from a Discogs URL in the clipboard'
        )

        url_parser = subparsers.add_parser(
            'url',
            help='Extract metadata from a Discogs URL'
        )
        url_parser.add_argument(
            'url',
            nargs='?',
            help='Discogs release URL (prompted for when omitted)'
        )

        search_parser = subparsers.add_parser(
            'search',
            help='Search Discogs and extract metadata for the chosen release'
        )
        search_parser.add_argument(
            'query',
            nargs='*',
            help='Artist or album name (prompted for when omitted)'
        )

        settings_parser = subparsers.add_parser(
            'settings',
            help='Show or change settings'
        )
        settings_sub = settings_parser.add_subparsers(dest='action', required=True)
        settings_sub.add_parser('show', help='Show current settings')
        set_parser = settings_sub.add_parser('set', help='Change one setting')
        set_parser.add_argument('key', choices=Settings.field_names())
        set_parser.add_argument('value')
        settings_sub.add_parser('reset', help='Restore default settings')

        return parser

    def build_pipeline(self, vault: str, note: Optional[str]) -> ExtractionPipeline:
        """Wire the pipeline for this invocation."""
        if note:
            surface = NoteFileSurface(Path(note))
        else:
            surface = ConsoleSurface()
        return ExtractionPipeline(
            client=DiscogsClient(),
            artwork_fetcher=ArtworkFetcher(Path(vault).expanduser()),
            renderer=TemplateRenderer(),
            document_surface=surface,
            notifier=self.display_manager
        )

    def run(self, args: List[str] = None) -> int:
        """Run the CLI with given arguments and return the exit code."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        if parsed_args.verbose:
            set_level("DEBUG")

        store = SettingsStore(Path(parsed_args.config).expanduser() if parsed_args.config else None)

        try:
            if parsed_args.mode == 'settings':
                return self._handle_settings(store, parsed_args)

            settings = store.load()
            validate_and_raise(settings)
            for warning in validate_settings(settings)[1]:
                logger.warning(warning)

            pipeline = self.build_pipeline(parsed_args.vault, parsed_args.note)

            if parsed_args.mode == 'clipboard':
                result = pipeline.run_from_clipboard(read_clipboard(), settings)
            elif parsed_args.mode == 'url':
                url = parsed_args.url or self.display_manager.ask("Paste your Discogs URL here")
                result = pipeline.run_from_input(url, settings)
            else:
                query = " ".join(parsed_args.query) or self.display_manager.ask("Enter artist or album name")
                result = self._handle_search(pipeline, query, settings)
            return self._exit_code(result)
        except KeyboardInterrupt:
            self.display_manager.console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            return 1
        except ExtractorError as e:
            self.display_manager.notify(f"Error: {e}", success=False)
            return 1

    def _handle_search(self, pipeline: ExtractionPipeline, query: str, settings: Settings) -> Optional[PipelineResult]:
        results = self.display_manager.show_loading_spinner(
            f"Searching Discogs: {query}",
            pipeline.search,
            query,
            settings
        )
        if results is None:
            return None
        if not results:
            self.display_manager.notify(ERROR_MESSAGES["NO_RESULTS"], success=False)
            return None

        self.display_manager.display_search_results(results)
        selected = self.display_manager.get_user_selection(results)
        if selected is None:
            return None
        return pipeline.select(selected, settings)

    def _handle_settings(self, store: SettingsStore, parsed_args: argparse.Namespace) -> int:
        if parsed_args.action == 'reset':
            store.reset()
            self.display_manager.notify(SUCCESS_MESSAGES["SETTINGS_RESTORED"])
            return 0

        settings = store.load()
        if parsed_args.action == 'set':
            value = parsed_args.value.replace("\\n", "\n") if parsed_args.key == 'metadata_template' else parsed_args.value
            settings = settings.with_value(parsed_args.key, value)
            store.save(settings)
            self.display_manager.notify(SUCCESS_MESSAGES["SETTINGS_SAVED"])

        self.display_manager.display_settings(settings, str(store.path))
        return 0

    @staticmethod
    def _exit_code(result: Optional[PipelineResult]) -> int:
        return 0 if result is not None and result.succeeded else 1
