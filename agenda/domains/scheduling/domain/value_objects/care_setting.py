"""Care setting value objects: where, what and how the visit is billed."""

from agenda.core.domain.value_objects import StatusEnum


class Location(StatusEnum):
    """Luogo della visita."""

    STUDIO = "studio"
    DOMICILE = "domicile"

    @property
    def display_name(self) -> str:
        return {"studio": "Studio", "domicile": "Domicilio"}[self.value]


class TreatmentType(StatusEnum):
    """Tipo di trattamento."""

    SEDUTA = "seduta"
    MACCHINARIO = "macchinario"

    @property
    def display_name(self) -> str:
        return {"seduta": "Seduta", "macchinario": "Macchinario"}[self.value]


class PriceType(StatusEnum):
    """Modalità di pagamento: fatturato o contanti."""

    INVOICED = "invoiced"
    CASH = "cash"

    @property
    def display_name(self) -> str:
        return {"invoiced": "Fatturato", "cash": "Contanti"}[self.value]
