"""
Standard Business Central API v2.0 entity catalog.
"""

from .core import CUSTOMER, VENDOR, ITEM, CONTACT
from .sales import SALES_INVOICE, SALES_INVOICE_LINE, SALES_ORDER_LINE, SALES_QUOTE_LINE
from .purchasing import PURCHASE_INVOICE_LINE
from .finance import (
    JOURNAL, JOURNAL_LINE, ACCOUNT, GENERAL_LEDGER_ENTRY, DIMENSION, DIMENSION_VALUE,
    BANK_ACCOUNT, AGED_ACCOUNTS_RECEIVABLE, AGED_ACCOUNTS_PAYABLE,
)
from .reference import (
    CURRENCY, PAYMENT_TERM, PAYMENT_METHOD, SHIPMENT_METHOD, UNIT_OF_MEASURE, ITEM_CATEGORY,
    COUNTRY_REGION, TAX_GROUP, COMPANY_INFORMATION, EMPLOYEE,
)

# Parents precede their nested collections when both ship here
STANDARD_ENTITIES = [
    # Core
    CUSTOMER,
    VENDOR,
    ITEM,
    CONTACT,
    # Sales documents
    SALES_INVOICE,
    SALES_INVOICE_LINE,
    SALES_ORDER_LINE,
    SALES_QUOTE_LINE,
    # Purchase documents
    PURCHASE_INVOICE_LINE,
    # Finance
    GENERAL_LEDGER_ENTRY,
    JOURNAL,
    JOURNAL_LINE,
    ACCOUNT,
    DIMENSION,
    DIMENSION_VALUE,
    BANK_ACCOUNT,
    AGED_ACCOUNTS_RECEIVABLE,
    AGED_ACCOUNTS_PAYABLE,
    # Setup / reference
    EMPLOYEE,
    CURRENCY,
    PAYMENT_TERM,
    PAYMENT_METHOD,
    SHIPMENT_METHOD,
    UNIT_OF_MEASURE,
    ITEM_CATEGORY,
    COUNTRY_REGION,
    COMPANY_INFORMATION,
    TAX_GROUP,
]

__all__ = ["STANDARD_ENTITIES"]
