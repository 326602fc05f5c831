from lxml import etree
from typing import List, Iterable

from typstyle.core.constants import (
    TAG_NAME, TAG_RUN_PROPERTIES, TAG_PARAGRAPH_PROPERTIES, TAG_FONTS, TAG_FONT_SIZE,
    ATTR_VAL, ATTR_TYPE, ATTR_STYLE_ID, ATTR_DEFAULT, FONT_ATTR_PRIORITY
)
from typstyle.core.parser.style_models import StyleRecord
from typstyle.core.parser.xml_utils import (
    local_name, element_children, find_child, get_attr, text_content
)

# Valores verdaderos de ST_OnOff
_ON_VALUES = ("1", "true", "on")

class StyleRecordBuilder:
    def __init__(self, attribute_keys: bool = False):
        self.attribute_keys = attribute_keys

    def build_all(self, style_nodes: Iterable[etree._Element]) -> List[StyleRecord]:
        return [self.build(node) for node in style_nodes]

    def build(self, style_node: etree._Element) -> StyleRecord:
        """
        Construye un StyleRecord a partir de un nodo <w:style>.
        Nunca falla: los datos ausentes quedan vacíos en el registro.
        """
        record = StyleRecord()

        # 1. Identidad
        record.kind = get_attr(style_node, ATTR_TYPE)
        record.style_id = get_attr(style_node, ATTR_STYLE_ID)
        record.is_default = (get_attr(style_node, ATTR_DEFAULT) or "").lower() in _ON_VALUES

        name_node = find_child(style_node, TAG_NAME)
        if name_node is not None:
            record.name = get_attr(name_node, ATTR_VAL)

        # 2. Propiedades (el orden importa: la última escritura gana)
        for child in element_children(style_node):
            tag = local_name(child)

            if tag == TAG_RUN_PROPERTIES:
                self._extract_font(child, record)
                for prop in element_children(child):
                    self._flatten(prop, record)
            elif tag == TAG_PARAGRAPH_PROPERTIES:
                for prop in element_children(child):
                    self._flatten(prop, record)
            else:
                self._flatten(child, record)

        return record

    def _extract_font(self, r_pr: etree._Element, record: StyleRecord):
        """Extrae w:rFonts y w:sz de un bloque <w:rPr>."""
        for child in element_children(r_pr):
            tag = local_name(child)

            if tag == TAG_FONTS:
                for attr_name in FONT_ATTR_PRIORITY:
                    font = get_attr(child, attr_name)
                    if font is not None:
                        record.font_family = font
                        break
            elif tag == TAG_FONT_SIZE:
                # Word usa medios puntos (24 = 12pt); se guarda tal cual
                size = get_attr(child, ATTR_VAL)
                if size is not None:
                    record.font_size_half_points = size

    def _flatten(self, node: etree._Element, record: StyleRecord):
        tag = local_name(node)

        val = get_attr(node, ATTR_VAL)
        if val is not None:
            record.properties[tag] = val
        else:
            # Sin w:val: texto del nodo, o marcador de presencia (ej. <w:b/>)
            record.properties[tag] = text_content(node)

        if self.attribute_keys:
            for key, value in node.attrib.items():
                attr_name = etree.QName(key).localname
                if attr_name != ATTR_VAL:
                    record.properties[f"{tag}:{attr_name}"] = value
