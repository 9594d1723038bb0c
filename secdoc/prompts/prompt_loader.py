from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def load_instruction(name: str, template_dir: Path | None = None) -> str:
    """Load one instruction block by analysis type name.

    Args:
        name: Analysis type, e.g. ``security-review``.
        template_dir: Directory holding ``<name>.txt`` files.
                      Defaults to the bundled templates.

    Raises:
        OSError: if the template file cannot be read.
    """
    directory = template_dir if template_dir is not None else _DEFAULT_TEMPLATE_DIR
    return (directory / f"{name}.txt").read_text(encoding="utf-8").strip()


def load_instructions(
    names: Iterable[str],
    template_dir: Path | None = None,
) -> Mapping[str, str]:
    """Load several instruction blocks into a read-only mapping."""
    return MappingProxyType({name: load_instruction(name, template_dir) for name in names})
