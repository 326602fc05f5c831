from pydantic_settings import BaseSettings

from typstyle.core.constants import PATH_STYLES

class Settings(BaseSettings):
    # Parte del paquete que contiene las definiciones de estilo
    STYLES_PART_PATH: str = PATH_STYLES

    # Política del localizador: solo estilos w:qFormat y no w:semiHidden
    QUICK_FORMAT_ONLY: bool = True

    # Agregar claves compuestas 'tag:atributo' para atributos distintos de w:val
    ATTRIBUTE_KEYS: bool = False

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "TYPSTYLE_"
        extra = "ignore"

settings = Settings()
