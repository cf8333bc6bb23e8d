"""Pydantic schemas for validating uploaded customer rows"""

from pydantic import BaseModel, ConfigDict, Field

from cashflow_risk.domain.models import CustomerRecord


class CustomerRecordIn(BaseModel):
    """One uploaded row after column normalization"""

    model_config = ConfigDict(str_strip_whitespace=True)

    customer_id: str = Field(..., min_length=1, description="Customer identifier")
    transaction_history: float = Field(..., allow_inf_nan=False, description="Transaction history score")
    affordability: float = Field(..., allow_inf_nan=False, description="Affordability score")
    employment: float = Field(..., allow_inf_nan=False, description="Employment stability score")
    behavior: float = Field(..., allow_inf_nan=False, description="Account behavior score")

    def to_domain(self) -> CustomerRecord:
        return CustomerRecord(
            customer_id=self.customer_id,
            transaction_history=self.transaction_history,
            affordability=self.affordability,
            employment=self.employment,
            behavior=self.behavior,
        )
