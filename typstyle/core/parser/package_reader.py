import logging
import zipfile
import zlib
from pathlib import Path
from typing import Union, BinaryIO, Optional
from lxml import etree

from typstyle.core.constants import PATH_STYLES
from typstyle.core.exceptions import OpenError, EntryNotFoundError, ReadError, ParseError

logger = logging.getLogger(__name__)


class PackageReader:
    """
    Encargado de abrir el contenedor ZIP de un .docx y leer sus partes internas.
    Debe usarse como context manager para garantizar el cierre del archivo.
    """

    def __init__(self, source: Union[str, Path, BinaryIO]):
        self._source = source
        self._zip_file: Optional[zipfile.ZipFile] = None
        self._open_zip()

    def _open_zip(self):
        """Abre el contenedor ZIP validando que sea un archivo accesible."""
        try:
            self._zip_file = zipfile.ZipFile(self._source, 'r')
        except zipfile.BadZipFile as e:
            raise OpenError(f"El archivo no es un contenedor ZIP válido: {e}") from e
        except FileNotFoundError as e:
            raise OpenError(f"No se encontró el archivo: {self._source}") from e
        except OSError as e:
            raise OpenError(f"No se pudo abrir el archivo '{self._source}': {e}") from e
        logger.debug(f"Paquete abierto: {self._source}")

    def read_entry(self, entry_name: str = PATH_STYLES) -> bytes:
        """
        Lee una parte interna del ZIP completa en memoria.

        Raises:
            EntryNotFoundError: si la parte no existe en el paquete.
            ReadError: si los bytes leídos no coinciden con el tamaño declarado
                o el contenido está corrupto.
        """
        try:
            info = self._zip_file.getinfo(entry_name)
        except KeyError as e:
            raise EntryNotFoundError(
                f"El archivo requerido '{entry_name}' no existe en el paquete DOCX."
            ) from e

        try:
            with self._zip_file.open(info) as f:
                data = f.read()
        except (zipfile.BadZipFile, EOFError, zlib.error, NotImplementedError, OSError,
                RuntimeError, ValueError) as e:
            # RuntimeError: entrada cifrada; ValueError: cabeceras inconsistentes
            raise ReadError(f"No se pudo leer '{entry_name}': {e}") from e

        if len(data) != info.file_size:
            raise ReadError(
                f"Lectura incompleta de '{entry_name}': "
                f"se esperaban {info.file_size} bytes, se leyeron {len(data)}."
            )

        logger.debug(f"Leídos {len(data)} bytes de '{entry_name}'")
        return data

    def close(self):
        if self._zip_file:
            self._zip_file.close()
            self._zip_file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def parse_xml(data: bytes, part_name: str = PATH_STYLES) -> etree._ElementTree:
    """Parsea los bytes de una parte XML creando un ElementTree completo."""
    if not data:
        raise ParseError(f"La parte '{part_name}' está vacía.")

    # Configuración de Seguridad del Parser XML
    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
        recover=False
    )
    try:
        return etree.ElementTree(etree.fromstring(data, parser=parser))
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Error de sintaxis XML en '{part_name}': {e}") from e
