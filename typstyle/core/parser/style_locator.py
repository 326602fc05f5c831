import logging
from typing import List
from lxml import etree

from typstyle.core.constants import TAG_STYLE, TAG_QUICK_FORMAT, TAG_SEMI_HIDDEN
from typstyle.core.parser.xml_utils import local_name, element_children, has_child

logger = logging.getLogger(__name__)

class StyleLocator:
    """
    Selecciona los nodos <w:style> hijos directos de la raíz de styles.xml.

    Con quick_format_only (por defecto) solo se aceptan los estilos visibles en
    la galería de Word: los que declaran <w:qFormat/> y no declaran <w:semiHidden/>.
    """

    def __init__(self, quick_format_only: bool = True):
        self.quick_format_only = quick_format_only

    def locate(self, xml_tree: etree._ElementTree) -> List[etree._Element]:
        root = xml_tree.getroot()
        candidates = [
            node for node in element_children(root)
            if local_name(node) == TAG_STYLE
        ]

        if not self.quick_format_only:
            return candidates

        selected = [node for node in candidates if self._is_quick_format(node)]
        logger.debug(f"Localizados {len(selected)} de {len(candidates)} estilos (filtro qFormat activo)")
        return selected

    def _is_quick_format(self, style_node: etree._Element) -> bool:
        return (
            has_child(style_node, TAG_QUICK_FORMAT)
            and not has_child(style_node, TAG_SEMI_HIDDEN)
        )
