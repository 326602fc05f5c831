from dataclasses import dataclass, field, asdict
from typing import Dict, Optional

@dataclass
class StyleRecord:
    """Representación plana de un estilo extraído de styles.xml."""
    name: Optional[str] = None   # w:name/@w:val
    kind: Optional[str] = None   # 'paragraph', 'character', 'table', 'numbering'

    # Fuente (w:rPr)
    font_family: str = ""            # w:rFonts (ascii > hAnsi > eastAsia)
    font_size_half_points: str = ""  # w:sz tal como viene declarado (24 = 12pt)

    # Propiedades aplanadas { 'tag' | 'tag:atributo': valor }
    properties: Dict[str, str] = field(default_factory=dict)

    style_id: Optional[str] = None
    is_default: bool = False

    @property
    def font_size_points(self) -> Optional[float]:
        """Tamaño en puntos (medios puntos / 2). None si no es numérico."""
        try:
            return int(self.font_size_half_points) / 2
        except (ValueError, TypeError):
            return None

    def to_dict(self) -> dict:
        return asdict(self)
