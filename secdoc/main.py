import json
import mimetypes
import sys
from pathlib import Path

import click

from secdoc.analysis.models import AnalysisRequest
from secdoc.analysis.orchestrator import build_orchestrator
from secdoc.config.settings import Settings
from secdoc.documents.processor import process_document
from secdoc.exceptions import SecdocError
from secdoc.extraction.extractor import MIME_DOCX, MIME_MARKDOWN, build_extractor
from secdoc.extraction.models import RawDocument
from secdoc.logging.logger import Log
from secdoc.prompts.selector import ANALYSIS_TYPES
from secdoc.providers.factory import ProviderAdapterFactory


_EXTENSION_MIME_TYPES = {
    ".md": MIME_MARKDOWN,
    ".markdown": MIME_MARKDOWN,
    ".docx": MIME_DOCX,
}


def _guess_mime_type(path: Path) -> str:
    known = _EXTENSION_MIME_TYPES.get(path.suffix.lower())
    if known is not None:
        return known
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or "application/octet-stream"


@click.group()
def cli() -> None:
    """Security-oriented document analysis with interchangeable AI providers."""


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--provider",
    default="claude",
    show_default=True,
    help="AI provider: claude, openai or gemini.",
)
@click.option(
    "--analysis-type",
    type=click.Choice(ANALYSIS_TYPES),
    default="general",
    show_default=True,
)
@click.option("--prompt", "custom_prompt", default=None, help="Custom instruction (max 1000 chars).")
@click.option("--mime-type", default=None, help="Override the mime type guessed from the file name.")
def analyze(
    path: Path,
    provider: str,
    analysis_type: str,
    custom_prompt: str | None,
    mime_type: str | None,
) -> None:
    """Extract PATH and print the analysis result as JSON."""
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    document = RawDocument.from_bytes(
        path.read_bytes(),
        mime_type=mime_type or _guess_mime_type(path),
        filename=path.name,
    )
    try:
        processed = process_document(
            document,
            build_extractor(settings),
            max_upload_bytes=settings.max_upload_bytes,
            min_content_length=settings.min_content_chars,
        )
        request = AnalysisRequest(
            content=processed.extracted,
            provider=provider,
            analysis_type=analysis_type,
            custom_prompt=custom_prompt,
        )
        result = build_orchestrator(settings).run_analysis(request)
    except SecdocError as exc:
        click.echo(f"error: {exc.code}: {exc}", err=True)
        sys.exit(1)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    click.echo(json.dumps(result.to_dict(), indent=2))


@cli.command()
def providers() -> None:
    """List providers and whether a credential is configured."""
    settings = Settings()
    for name, configured in ProviderAdapterFactory.available_providers(settings).items():
        click.echo(f"{name}: {'configured' if configured else 'not configured'}")


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
