from typing import List, Optional
from lxml import etree

# Sin smart strings: el resultado es un str plano que no referencia al árbol
_STRING_VALUE = etree.XPath("string()", smart_strings=False)


def local_name(node) -> Optional[str]:
    """Nombre local del tag sin namespace. None para comentarios e instrucciones."""
    if not isinstance(node.tag, str):
        return None
    return etree.QName(node).localname


def element_children(node: etree._Element) -> List[etree._Element]:
    """Hijos directos que son elementos, en orden de documento."""
    return [child for child in node if isinstance(child.tag, str)]


def has_child(node: etree._Element, name: str) -> bool:
    return any(local_name(child) == name for child in element_children(node))


def find_child(node: etree._Element, name: str) -> Optional[etree._Element]:
    for child in element_children(node):
        if local_name(child) == name:
            return child
    return None


def get_attr(node: etree._Element, name: str) -> Optional[str]:
    """
    Busca un atributo por nombre local, sin importar el prefijo con el que
    se haya declarado (w:val, val, x:val...).
    """
    for key, value in node.attrib.items():
        if etree.QName(key).localname == name:
            return value
    return None


def text_content(node: etree._Element) -> str:
    # string() de XPath: concatenación de todos los nodos de texto descendientes
    return _STRING_VALUE(node)
