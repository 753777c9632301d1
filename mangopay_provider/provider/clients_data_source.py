"""Data source exposing the platform client profile."""
from __future__ import annotations
import logging

import requests

from mangopay_provider.core.mangopay import MangopayError, PlatformClient, PlatformClientService

from .base import ProviderComponent
from .diagnostics import Diagnostics, Result
from .schema import Schema, Attribute, STRING, LIST, OBJECT

logger = logging.getLogger(__name__)


def _computed(description: str, **kwargs) -> Attribute:
    return Attribute(description=description, computed=True, **kwargs)


def _email_list(description: str) -> Attribute:
    return _computed(description, type=LIST, element_type=STRING)


class ClientsDataSource(ProviderComponent):
    """Read-only view of the authenticated platform (``mangopay_clients``)."""

    type_suffix = "clients"

    def schema(self) -> Schema:
        return Schema(
            description="Clients data source",
            attributes={
                "platform_type": _computed("The type of the platform"),
                "client_id": _computed(
                    "The unique identifier associated with the API key, giving access to either the Sandbox or Production environment."
                ),
                "name": _computed("The trading name of the company operating the platform"),
                "registered_name": _computed("The registered legal name of the company operating the platform"),
                "tech_emails": _email_list("List of email addresses to contact the platform for technical matters"),
                "admin_emails": _email_list("List of email addresses to contact the platform for administrative or commercial matters"),
                "billing_emails": _email_list("List of email addresses to contact the platform for billing matters"),
                "fraud_emails": _email_list("List of email addresses to contact the platform for fraud and compliance matters"),
                "headquarters_address": _computed(
                    "The address of the platform operator's headquarters. This parameter must be provided for the platform's payouts to be processed",
                    type=OBJECT,
                    attributes={
                        "address_line1": _computed("The first line of the address"),
                        "address_line2": _computed("The second line of the address"),
                        "city": _computed("The city of the address."),
                        "region": _computed("The region of the address."),
                        "postal_code": _computed("The postal code of the address."),
                        "country": _computed("The country of the address."),
                    },
                ),
                "headquarters_phone_number": _computed("The phone number of the platform operator's headquarters."),
                "tax_number": _computed("The tax (or VAT) number for the company operating the platform."),
                "platform_categorization": _computed(
                    "The categorization of the platform in terms of business and sector of activity",
                    type=OBJECT,
                    attributes={
                        "business_type": _computed("The business type of the platform"),
                        "sector": _computed("The sector of activity of the platform"),
                    },
                ),
                "platform_url": _computed("The URL of the platform's website"),
                "platform_description": _computed("The description of what the platform does"),
                "company_reference": _computed("The unique reference for the platform, which should be used when contacting Mangopay"),
                "primary_theme_colour": _computed(
                    "The primary color of your branding, which is displayed on some payment pages (e.g., mandate confirmation)"
                ),
                "primary_button_colour": _computed(
                    "The primary color of your branding, which is displayed in call-to-action buttons on some payment pages (e.g., mandate confirmation)."
                ),
                "logo": _computed("The URL of the platform's logo. Logos may be added by using the Upload a Client Logo endpoint."),
                "company_number": _computed(
                    "The registration number of the company operating the platform, assigned by the relevant national authority."
                ),
                "mcc": _computed(
                    "4-digit merchant category code. The MCC is used to classify a business by the types of goods or services it provides."
                ),
            },
        )

    def read(self) -> Result:
        diags = Diagnostics()
        if not self._require_client(diags):
            return Result(None, diags)

        try:
            platform_client = PlatformClientService(self.client).get_platform_client()
        except (MangopayError, requests.RequestException, ValueError) as e:
            diags.add_error("Unable to Read Mangopay Clients", str(e))
            return Result(None, diags)

        logger.debug("Read platform client %s", platform_client.client_id)
        return Result(platform_client_to_state(platform_client), diags)


def platform_client_to_state(pc: PlatformClient) -> dict:
    address = pc.headquarters_address
    categorization = pc.platform_categorization
    return {
        "platform_type": pc.platform_type,
        "client_id": pc.client_id,
        "name": pc.name,
        "registered_name": pc.registered_name,
        "tech_emails": list(pc.tech_emails),
        "admin_emails": list(pc.admin_emails),
        "billing_emails": list(pc.billing_emails),
        "fraud_emails": list(pc.fraud_emails),
        "headquarters_address": {
            "address_line1": address.address_line1,
            "address_line2": address.address_line2,
            "city": address.city,
            "region": address.region,
            "postal_code": address.postal_code,
            "country": address.country,
        },
        "headquarters_phone_number": pc.headquarters_phone_number,
        "tax_number": pc.tax_number,
        "platform_categorization": {
            "business_type": categorization.business_type,
            "sector": categorization.sector,
        },
        "platform_url": pc.platform_url,
        "platform_description": pc.platform_description,
        "company_reference": pc.company_reference,
        "primary_theme_colour": pc.primary_theme_colour,
        "primary_button_colour": pc.primary_button_colour,
        "logo": pc.logo,
        "company_number": pc.company_number,
        "mcc": pc.mcc,
    }
