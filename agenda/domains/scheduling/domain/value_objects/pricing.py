"""Standard price list."""

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from agenda.core.domain.value_objects import ValueObject

from .care_setting import PriceType, TreatmentType

if TYPE_CHECKING:
    from agenda.config.settings import Settings


@dataclass(frozen=True)
class PriceList(ValueObject):
    """Tariffe standard per trattamento e modalità di pagamento.

    Usata dall'editor, dalle statistiche del calendario e dai report, così
    un importo nullo vale lo stesso ovunque.
    """

    seduta_invoiced: Decimal = Decimal("40")
    seduta_cash: Decimal = Decimal("35")
    macchinario_invoiced: Decimal = Decimal("25")
    macchinario_cash: Decimal = Decimal("20")

    def _validate(self) -> None:
        for name in ("seduta_invoiced", "seduta_cash", "macchinario_invoiced", "macchinario_cash"):
            if getattr(self, name) < 0:
                raise ValueError(f"Price {name} cannot be negative")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PriceList":
        return cls(
            seduta_invoiced=settings.PRICE_SEDUTA_INVOICED,
            seduta_cash=settings.PRICE_SEDUTA_CASH,
            macchinario_invoiced=settings.PRICE_MACCHINARIO_INVOICED,
            macchinario_cash=settings.PRICE_MACCHINARIO_CASH,
        )

    def standard_price(self, treatment: TreatmentType, price_type: PriceType) -> Decimal:
        """Tariffa standard della coppia trattamento/pagamento."""
        return getattr(self, f"{treatment.value}_{price_type.value}")

    def effective_price(
        self,
        amount: Decimal | None,
        treatment: TreatmentType,
        price_type: PriceType,
    ) -> Decimal:
        """L'importo registrato, oppure la tariffa standard se è nullo."""
        if amount is not None:
            return amount
        return self.standard_price(treatment, price_type)
