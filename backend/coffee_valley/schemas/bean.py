"""Bean Schemas - catalog entries, daily prices and the joined price view.

Invariants:
    - Bean JSON uses description_name while the column is description_bean
    - The joined view (BeanPrice) reports description_bean under its column name
    - sale_price is an integer everywhere
"""

from pydantic import BaseModel

from coffee_valley.models.bean import Bean
from coffee_valley.schemas.common import EnvelopeResponse, RequestBody


class BeanCreate(RequestBody):
    bean_name: str | None = None
    description_name: str | None = None
    price_per_unit: str | None = None

    def to_record(self) -> Bean:
        return Bean(
            bean_name=self.bean_name,
            description_bean=self.description_name,
            price_per_unit=self.price_per_unit,
        )


class BeanResponse(EnvelopeResponse):
    id: str
    bean_name: str | None = None
    description_name: str | None = None
    price_per_unit: str | None = None

    @classmethod
    def from_record(cls, bean: Bean) -> "BeanResponse":
        return cls(
            id=bean.id,
            bean_name=bean.bean_name,
            description_name=bean.description_bean,
            price_per_unit=bean.price_per_unit,
            created_at=bean.created_at,
            updated_at=bean.updated_at,
        )


class DailyBeanCreate(RequestBody):
    bean_id: str | None = None
    sale_price: int | None = None


class DailyBeanResponse(EnvelopeResponse):
    id: str
    bean_id: str | None = None
    sale_price: int | None = None


class BeanPrice(BaseModel):
    """One row of beans INNER JOIN daily_beans."""
    bean_name: str | None = None
    description_bean: str | None = None
    sale_price: int | None = None
