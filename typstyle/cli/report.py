import argparse
import json
import logging
import sys
from typing import List, Optional
from tabulate import tabulate

from typstyle.config import settings
from typstyle.core.exceptions import TypStyleError
from typstyle.core.extractor import extract_styles
from typstyle.core.parser.style_models import StyleRecord

logger = logging.getLogger("typstyle")

NO_VALUE = "[no value]"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def render_styles(styles: List[StyleRecord]) -> str:
    """Arma el reporte de consola: un bloque por estilo con sus propiedades."""
    if not styles:
        return "No se encontraron estilos en el documento."

    blocks = [f"Se encontraron {len(styles)} estilos:"]
    for style in styles:
        rows = []
        if style.font_family:
            rows.append(["Font", style.font_family])
        if style.font_size_half_points:
            rows.append(["Font Size", style.font_size_half_points])
        for key, value in style.properties.items():
            rows.append([key, value if value else NO_VALUE])

        header = f"Estilo: {style.name or '-'} (Tipo: {style.kind or '-'})"
        if rows:
            blocks.append(header + "\n" + tabulate(rows, headers=["Propiedad", "Valor"], tablefmt="grid"))
        else:
            blocks.append(header)

    return "\n\n".join(blocks)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TypStyle - Extractor de estilos DOCX")
    parser.add_argument("path", help="Ruta del documento .docx")
    parser.add_argument("--all", action="store_true", help="Incluir estilos ocultos o sin qFormat")
    parser.add_argument("--attributes", action="store_true", help="Agregar claves 'tag:atributo'")
    parser.add_argument("--json", action="store_true", help="Salida en formato JSON")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, type=str.upper,
                        choices=LOG_LEVELS, help="Nivel de logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    quick_format_only = False if args.all else None
    attribute_keys = True if args.attributes else None

    try:
        styles = extract_styles(args.path, quick_format_only=quick_format_only, attribute_keys=attribute_keys)
    except TypStyleError as e:
        logger.error(f"❌ No se pudieron extraer los estilos de {args.path}: {e}")
        return 1

    if args.json:
        print(json.dumps([s.to_dict() for s in styles], ensure_ascii=False, indent=2))
    else:
        print(render_styles(styles))
    return 0


if __name__ == "__main__":
    sys.exit(main())
