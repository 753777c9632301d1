"""Mangopay API representations.

JSON bodies use the PascalCase keys of the remote schema; attributes use
snake_case. Each model converts with ``from_dict`` / ``to_dict``.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


def _expect_object(data: Any, what: str) -> Dict[str, Any]:
    """Return ``data`` if it is a JSON object, else raise ValueError."""
    if not isinstance(data, dict):
        raise ValueError(f"unexpected {what} payload: expected a JSON object, got {type(data).__name__}")
    return data


@dataclass
class Address:
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Address":
        data = data or {}
        return cls(
            address_line1=data.get("AddressLine1") or "",
            address_line2=data.get("AddressLine2") or "",
            city=data.get("City") or "",
            region=data.get("Region") or "",
            postal_code=data.get("PostalCode") or "",
            country=data.get("Country") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "AddressLine1": self.address_line1,
            "AddressLine2": self.address_line2,
            "City": self.city,
            "Region": self.region,
            "PostalCode": self.postal_code,
            "Country": self.country,
        }


@dataclass
class PlatformCategorization:
    business_type: str = ""
    sector: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PlatformCategorization":
        data = data or {}
        return cls(
            business_type=data.get("BusinessType") or "",
            sector=data.get("Sector") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"BusinessType": self.business_type, "Sector": self.sector}


@dataclass
class PlatformClient:
    """Read-only profile of the platform operating against the API."""
    platform_type: str = ""
    client_id: str = ""
    name: str = ""
    registered_name: str = ""
    tech_emails: List[str] = field(default_factory=list)
    admin_emails: List[str] = field(default_factory=list)
    billing_emails: List[str] = field(default_factory=list)
    fraud_emails: List[str] = field(default_factory=list)
    headquarters_address: Address = field(default_factory=Address)
    headquarters_phone_number: str = ""
    tax_number: str = ""
    platform_categorization: PlatformCategorization = field(default_factory=PlatformCategorization)
    platform_url: str = ""
    platform_description: str = ""
    company_reference: str = ""
    primary_theme_colour: str = ""
    primary_button_colour: str = ""
    logo: str = ""
    company_number: str = ""
    mcc: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlatformClient":
        data = _expect_object(data, "platform client")
        return cls(
            platform_type=data.get("PlatformType") or "",
            client_id=data.get("ClientId") or "",
            name=data.get("Name") or "",
            registered_name=data.get("RegisteredName") or "",
            tech_emails=list(data.get("TechEmails") or []),
            admin_emails=list(data.get("AdminEmails") or []),
            billing_emails=list(data.get("BillingEmails") or []),
            fraud_emails=list(data.get("FraudEmails") or []),
            headquarters_address=Address.from_dict(data.get("HeadquartersAddress")),
            headquarters_phone_number=data.get("HeadquartersPhoneNumber") or "",
            tax_number=data.get("TaxNumber") or "",
            platform_categorization=PlatformCategorization.from_dict(data.get("PlatformCategorization")),
            platform_url=data.get("PlatformURL") or "",
            platform_description=data.get("PlatformDescription") or "",
            company_reference=data.get("CompanyReference") or "",
            primary_theme_colour=data.get("PrimaryThemeColour") or "",
            primary_button_colour=data.get("PrimaryButtonColour") or "",
            logo=data.get("Logo") or "",
            company_number=data.get("CompanyNumber") or "",
            mcc=data.get("MCC") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "PlatformType": self.platform_type,
            "ClientId": self.client_id,
            "Name": self.name,
            "RegisteredName": self.registered_name,
            "TechEmails": list(self.tech_emails),
            "AdminEmails": list(self.admin_emails),
            "BillingEmails": list(self.billing_emails),
            "FraudEmails": list(self.fraud_emails),
            "HeadquartersAddress": self.headquarters_address.to_dict(),
            "HeadquartersPhoneNumber": self.headquarters_phone_number,
            "TaxNumber": self.tax_number,
            "PlatformCategorization": self.platform_categorization.to_dict(),
            "PlatformURL": self.platform_url,
            "PlatformDescription": self.platform_description,
            "CompanyReference": self.company_reference,
            "PrimaryThemeColour": self.primary_theme_colour,
            "PrimaryButtonColour": self.primary_button_colour,
            "Logo": self.logo,
            "CompanyNumber": self.company_number,
            "MCC": self.mcc,
        }


# JSON key for each Hook attribute, in wire order
_HOOK_FIELDS = (
    ("id", "Id"),
    ("url", "Url"),
    ("status", "Status"),
    ("validity", "Validity"),
    ("event_type", "EventType"),
    ("tag", "Tag"),
    ("creation_date", "CreationDate"),
)


@dataclass
class Hook:
    """Webhook registration.

    Every attribute is optional so the same type serves as request body
    (only the writable fields set) and as response representation.
    """
    id: Optional[str] = None
    url: Optional[str] = None
    status: Optional[str] = None
    validity: Optional[str] = None
    event_type: Optional[str] = None
    tag: Optional[str] = None
    creation_date: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Hook":
        data = _expect_object(data, "hook")
        return cls(**{attr: data.get(key) for attr, key in _HOOK_FIELDS})

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON body, leaving out attributes that are not set."""
        return {
            key: getattr(self, attr)
            for attr, key in _HOOK_FIELDS
            if getattr(self, attr) is not None
        }


@dataclass
class AuthResponse:
    access_token: str
    token_type: str = ""
    expires_in: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthResponse":
        data = _expect_object(data, "token")
        if not data.get("access_token"):
            raise ValueError("token response does not contain an access_token")
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type") or "",
            expires_in=int(data.get("expires_in") or 0),
        )
