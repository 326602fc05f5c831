import logging
from pathlib import Path
from typing import List, Optional, Union, BinaryIO

from typstyle.config import settings
from typstyle.core.parser.package_reader import PackageReader, parse_xml
from typstyle.core.parser.style_locator import StyleLocator
from typstyle.core.parser.style_models import StyleRecord
from typstyle.core.parser.style_parser import StyleRecordBuilder

logger = logging.getLogger(__name__)


def extract_styles(
    source: Union[str, Path, BinaryIO],
    quick_format_only: Optional[bool] = None,
    attribute_keys: Optional[bool] = None,
    part_name: Optional[str] = None,
) -> List[StyleRecord]:
    """
    Extrae las definiciones de estilo de un documento .docx.

    Pipeline: ZIP -> word/styles.xml -> árbol XML -> nodos <w:style> -> StyleRecord.
    Los argumentos en None toman el valor de la configuración (TYPSTYLE_*).

    Raises:
        OpenError, EntryNotFoundError, ReadError, ParseError. Una lista vacía
        significa que el documento no tiene estilos que cumplan el filtro.
    """
    if quick_format_only is None:
        quick_format_only = settings.QUICK_FORMAT_ONLY
    if attribute_keys is None:
        attribute_keys = settings.ATTRIBUTE_KEYS
    part_name = part_name or settings.STYLES_PART_PATH

    # 1. Extraer XML de estilos (el ZIP se cierra al salir del bloque)
    with PackageReader(source) as reader:
        xml_bytes = reader.read_entry(part_name)

    # 2. Parsear
    styles_tree = parse_xml(xml_bytes, part_name)

    # 3. Localizar y construir
    style_nodes = StyleLocator(quick_format_only=quick_format_only).locate(styles_tree)
    records = StyleRecordBuilder(attribute_keys=attribute_keys).build_all(style_nodes)

    logger.info(f"Extraídos {len(records)} estilos de {source}")
    return records
