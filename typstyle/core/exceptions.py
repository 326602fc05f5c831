class TypStyleError(Exception):
    """Excepción base para el extractor de estilos."""
    pass

class OpenError(TypStyleError):
    """El archivo no existe, no se puede leer o no es un contenedor ZIP válido."""
    pass

class OOXMLError(TypStyleError):
    """El archivo es un ZIP pero no cumple la estructura interna OOXML esperada."""
    pass

class EntryNotFoundError(OOXMLError):
    """El paquete no contiene la parte solicitada (ej. word/styles.xml)."""
    pass

class ReadError(OOXMLError):
    """La parte existe pero no pudo leerse completa (truncada o corrupta)."""
    pass

class ParseError(OOXMLError):
    """El contenido de la parte no es XML bien formado."""
    pass
