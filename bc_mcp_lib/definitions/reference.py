"""
Setup and reference data: currencies, terms, methods, units, categories, company info, employees.
"""

from ..models import EntityDefinition, FieldDefinition as F, NavigationProperty as Nav


def _code_table(name, plural, description, label, code_length=10, name_length=50, code_hint="", extra=()):
    """Entities shaped as id/code/displayName/lastModifiedDateTime."""
    return EntityDefinition(
        name=name,
        plural_name=plural,
        api_path=plural,
        description=description,
        fields=[
            F(name="id", type="guid", read_only=True, description=f"The unique identifier for the {label}."),
            F(name="code", type="string", max_length=code_length, description=f"The code of the {label}{code_hint}."),
            F(name="displayName", type="string", max_length=name_length, description=f"The display name of the {label}."),
            *extra,
            F(name="lastModifiedDateTime", type="datetime", read_only=True,
              description=f"The date and time the {label} was last modified."),
        ],
    )


CURRENCY = EntityDefinition(
    name="currency",
    plural_name="currencies",
    api_path="currencies",
    description="Represents a currency in Business Central. Currencies define the monetary units used for transactions.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the currency."),
        F(name="code", type="string", max_length=10, description="The ISO currency code (e.g. USD, EUR, GBP)."),
        F(name="displayName", type="string", max_length=30, description="The display name of the currency."),
        F(name="symbol", type="string", max_length=10, description="The symbol of the currency (e.g. $, EUR)."),
        F(name="amountDecimalPlaces", type="string", max_length=5, description="The number of decimal places for amounts in this currency."),
        F(name="amountRoundingPrecision", type="decimal", description="The rounding precision for amounts in this currency."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the currency was last modified."),
    ],
)

PAYMENT_TERM = EntityDefinition(
    name="paymentTerm",
    plural_name="paymentTerms",
    api_path="paymentTerms",
    description="Represents payment terms in Business Central. Payment terms define when and how payment is due from customers or to vendors.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the payment term."),
        F(name="code", type="string", max_length=10, description="The code of the payment term (e.g. NET30, 2/10NET30)."),
        F(name="displayName", type="string", max_length=50, description="The display name of the payment term."),
        F(name="dueDateCalculation", type="string", max_length=32, description="The date formula for calculating the due date (e.g. 30D for 30 days)."),
        F(name="discountDateCalculation", type="string", max_length=32, description="The date formula for calculating the discount date."),
        F(name="discountPercent", type="decimal", description="The discount percentage if paid within the discount period."),
        F(name="calculateDiscountOnCreditMemos", type="boolean", description="Whether to calculate the discount on credit memos."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the payment term was last modified."),
    ],
)

PAYMENT_METHOD = _code_table(
    "paymentMethod", "paymentMethods",
    "Represents a payment method in Business Central. Payment methods define how payments are made (e.g. cash, check, bank transfer).",
    "payment method",
)

SHIPMENT_METHOD = _code_table(
    "shipmentMethod", "shipmentMethods",
    "Represents a shipment method in Business Central. Shipment methods define how goods are shipped to customers (e.g. FOB, CIF).",
    "shipment method",
)

UNIT_OF_MEASURE = _code_table(
    "unitOfMeasure", "unitsOfMeasure",
    "Represents a unit of measure in Business Central. Units of measure define how items are quantified (e.g. pieces, kilograms, hours).",
    "unit of measure", code_hint=" (e.g. PCS, KG, HR)",
    extra=[F(name="internationalStandardCode", type="string", max_length=10,
             description="The international standard code (UN/CEFACT) for the unit of measure.")],
)

ITEM_CATEGORY = _code_table(
    "itemCategory", "itemCategories",
    "Represents an item category in Business Central. Item categories are used to group items for reporting and analysis.",
    "item category", code_length=20, name_length=100,
)

COUNTRY_REGION = _code_table(
    "countryRegion", "countriesRegions",
    "Represents a country/region in Business Central. Countries/regions are used for address formatting and tax reporting.",
    "country/region", code_hint=" (ISO code, e.g. US, GB, DE)",
    extra=[F(name="addressFormat", type="string", max_length=100, description="The address format used for the country/region.")],
)

TAX_GROUP = _code_table(
    "taxGroup", "taxGroups",
    "Represents a tax group in Business Central. Tax groups are used to group items and resources for tax calculation purposes.",
    "tax group", code_length=20, name_length=100,
    extra=[F(name="taxType", type="string", max_length=30, description="The tax type for the group (e.g. Sales Tax, VAT).")],
)

COMPANY_INFORMATION = EntityDefinition(
    name="companyInformation",
    plural_name="companyInformation",
    api_path="companyInformation",
    description="Represents the company information in Business Central. Contains the company's name, address, contact details, and other identification data.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the company information."),
        F(name="displayName", type="string", max_length=100, description="The display name of the company."),
        F(name="addressLine1", type="string", max_length=100, description="The first line of the company address."),
        F(name="addressLine2", type="string", max_length=50, description="The second line of the company address."),
        F(name="city", type="string", max_length=30, description="The city of the company address."),
        F(name="state", type="string", max_length=30, description="The state of the company address."),
        F(name="country", type="string", max_length=10, description="The country/region code of the company address."),
        F(name="postalCode", type="string", max_length=20, description="The postal code of the company address."),
        F(name="phoneNumber", type="string", max_length=30, description="The phone number of the company."),
        F(name="faxNumber", type="string", max_length=30, description="The fax number of the company."),
        F(name="email", type="string", max_length=80, description="The email address of the company."),
        F(name="website", type="string", max_length=80, description="The website URL of the company."),
        F(name="taxRegistrationNumber", type="string", max_length=20, description="The tax registration number (VAT number) of the company."),
        F(name="currencyCode", type="string", max_length=10, description="The local currency code of the company."),
        F(name="currentFiscalYearStartDate", type="date", description="The start date of the current fiscal year."),
        F(name="industry", type="string", max_length=30, description="The industry the company operates in."),
        F(name="picture", type="string", description="The company logo/picture as a base64 encoded string."),
        F(name="businessProfileId", type="string", max_length=50, description="The business profile identifier."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the company information was last modified."),
    ],
)

EMPLOYEE = EntityDefinition(
    name="employee",
    plural_name="employees",
    api_path="employees",
    description="Represents an employee in Business Central. Employees are people who work for the company.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the employee."),
        F(name="number", type="string", max_length=20, description="The employee number. Auto-generated if not specified."),
        F(name="displayName", type="string", max_length=100, description="The full display name of the employee."),
        F(name="givenName", type="string", max_length=30, description="The given (first) name of the employee."),
        F(name="middleName", type="string", max_length=30, description="The middle name of the employee."),
        F(name="surname", type="string", max_length=30, description="The surname (last name) of the employee."),
        F(name="jobTitle", type="string", max_length=30, description="The job title of the employee."),
        F(name="addressLine1", type="string", max_length=100, description="The first line of the employee address."),
        F(name="addressLine2", type="string", max_length=50, description="The second line of the employee address."),
        F(name="city", type="string", max_length=30, description="The city of the employee address."),
        F(name="state", type="string", max_length=30, description="The state of the employee address."),
        F(name="country", type="string", max_length=10, description="The country/region code of the employee address."),
        F(name="postalCode", type="string", max_length=20, description="The postal code of the employee address."),
        F(name="phoneNumber", type="string", max_length=30, description="The phone number of the employee."),
        F(name="mobilePhone", type="string", max_length=30, description="The mobile phone number of the employee."),
        F(name="email", type="string", max_length=80, description="The work email address of the employee."),
        F(name="personalEmail", type="string", max_length=80, description="The personal email address of the employee."),
        F(name="employmentDate", type="date", description="The date the employee started employment."),
        F(name="terminationDate", type="date", description="The date the employee's employment was terminated, if applicable."),
        F(name="status", type="enum", enum_values=["Active", "Inactive"], description="The employment status of the employee."),
        F(name="birthDate", type="date", description="The birth date of the employee."),
        F(name="statisticsGroupCode", type="string", max_length=10, description="The statistics group code for the employee."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the employee was last modified."),
    ],
    navigation_properties=[
        Nav(name="picture", target_entity="picture", description="The picture of the employee."),
        Nav(name="defaultDimensions", target_entity="defaultDimension", is_collection=True, description="The default dimensions for the employee."),
        Nav(name="timeRegistrationEntries", target_entity="timeRegistrationEntry", is_collection=True,
            description="The time registration entries for the employee."),
    ],
)
