"""
javagen_lib: generates the Java function interfaces and tuple classes of arity 0..N
from indentation-aware string templates.

Public API:
- align(parts: Sequence[str], args: Sequence[Any]) -> str
- render(template: str, **values) -> str
- expand(lo: int, hi: int, f: Callable[[int], Any], delimiter: str = "") -> str
- emit(package_path, file_name, header, body, output_dir=..., charset="utf-8") -> str
- run(config: GeneratorConfig | None = None) -> list[str]
- load_config(path: str, base: GeneratorConfig | None = None) -> GeneratorConfig

The template engine:
- Re-indents multi-line arguments to the column they are inserted at, so generated
  snippets can be nested inside other templates.
- Drops one leading and one trailing blank line, strips the indentation all
  non-blank lines share and collapses runs of blank lines into one.
- Takes arguments either as explicit parts/args sequences (align) or as ${name}
  placeholders (render).
"""
from .align import align, expand, render
from .config import ConfigError, GeneratorConfig, load_config
from .emitter import CLASS_HEADER, emit
from .generator import run

__all__ = [
    "align",
    "expand",
    "render",
    "emit",
    "run",
    "CLASS_HEADER",
    "ConfigError",
    "GeneratorConfig",
    "load_config",
]
