"""
Constantes OOXML usadas por el extractor de estilos.
Referencia: ECMA-376 Standard.

Los nodos se comparan por nombre local, sin importar el prefijo o la URI
del namespace de WordprocessingML.
"""

# Ruta estándar dentro del ZIP
PATH_STYLES = "word/styles.xml"

# Nombres locales de los nodos que interpretamos
TAG_STYLE = "style"
TAG_NAME = "name"
TAG_RUN_PROPERTIES = "rPr"
TAG_PARAGRAPH_PROPERTIES = "pPr"
TAG_FONTS = "rFonts"
TAG_FONT_SIZE = "sz"
TAG_QUICK_FORMAT = "qFormat"
TAG_SEMI_HIDDEN = "semiHidden"

# Atributos
ATTR_VAL = "val"
ATTR_TYPE = "type"
ATTR_STYLE_ID = "styleId"
ATTR_DEFAULT = "default"

# Prioridad de lectura de w:rFonts (el primero presente gana)
FONT_ATTR_PRIORITY = ("ascii", "hAnsi", "eastAsia")
