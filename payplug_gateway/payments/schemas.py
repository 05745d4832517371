"""Payment schemas for provider communication."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PaymentRequest(BaseModel):
    """Parameters for payment initiation (matches PayPlug format)."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(..., ge=0, description="Amount in cents")
    currency: str = Field(..., min_length=1, description="ISO 4217 currency code")

    # Optional parameters
    ipn_url: str | None = Field(default=None, description="Notification URL, falls back to account default")
    return_url: str | None = Field(default=None, description="Redirect after successful payment")
    cancel_url: str | None = Field(default=None, description="Redirect after cancelled payment")
    email: str | None = Field(default=None, description="Customer email")
    first_name: str | None = Field(default=None, description="Customer first name")
    last_name: str | None = Field(default=None, description="Customer last name")
    customer: str | None = Field(default=None, description="Merchant customer reference")
    order: str | None = Field(default=None, description="Merchant order reference")
    custom_data: str | None = Field(default=None, description="Opaque data echoed back in IPN")
    origin: str | None = Field(default=None, description="Integration tag")


class IpnState(str, Enum):
    """Payment state reported by PayPlug IPN."""

    PAID = "paid"
    REFUNDED = "refunded"


class IpnNotification(BaseModel):
    """Verified IPN callback data (matches PayPlug format)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    state: IpnState = Field(..., description="Payment state")
    id_transaction: int = Field(..., description="PayPlug transaction ID")
    amount: int = Field(..., ge=0, description="Amount in cents")

    # Echoed from the payment request
    customer: str | None = Field(default=None, description="Merchant customer reference")
    order: str | None = Field(default=None, description="Merchant order reference")
    custom_data: str | None = Field(default=None, description="Opaque data from the request")
    origin: str | None = Field(default=None, description="Integration tag")
    email: str | None = Field(default=None, description="Customer email")
    first_name: str | None = Field(default=None, description="Customer first name")
    last_name: str | None = Field(default=None, description="Customer last name")
    is_test: bool = Field(default=False, description="Sent from test mode")
