from pydantic import BaseModel, condecimal, constr
from typing import Literal


class P2PMatchRequest(BaseModel):
    type: Literal["buy", "sell"]
    cryptocurrency: constr(strip_whitespace=True, min_length=1, to_upper=True)
    fiat_currency: constr(strip_whitespace=True, min_length=1, to_upper=True)


class P2POrderCreateRequest(BaseModel):
    type: Literal["buy", "sell"]
    cryptocurrency: constr(strip_whitespace=True, min_length=1, max_length=10, to_upper=True)
    fiat_currency: constr(strip_whitespace=True, min_length=1, max_length=10, to_upper=True)
    price: condecimal(gt=0, max_digits=18, decimal_places=2)
    amount: condecimal(gt=0, max_digits=28, decimal_places=8)
