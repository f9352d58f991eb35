"""
Customers, vendors, items and contacts.
"""

from ..models import EntityDefinition, FieldDefinition as F, NavigationProperty as Nav


CUSTOMER = EntityDefinition(
    name="customer",
    plural_name="customers",
    api_path="customers",
    description="Represents a customer in Business Central. Customers are parties that purchase goods or services from the company.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the customer."),
        F(name="number", type="string", max_length=20, description="The customer number. Auto-generated if not specified on creation."),
        F(name="displayName", type="string", required=True, max_length=100, description="The customer display name."),
        F(name="type", type="enum", enum_values=["Company", "Person"], description="The type of the customer (Company or Person)."),
        F(name="addressLine1", type="string", max_length=100, description="The first line of the customer address."),
        F(name="addressLine2", type="string", max_length=50, description="The second line of the customer address."),
        F(name="city", type="string", max_length=30, description="The city of the customer address."),
        F(name="state", type="string", max_length=30, description="The state or province of the customer address."),
        F(name="country", type="string", max_length=10, description="The country/region code of the customer address."),
        F(name="postalCode", type="string", max_length=20, description="The postal or ZIP code of the customer address."),
        F(name="phoneNumber", type="string", max_length=30, description="The phone number of the customer."),
        F(name="email", type="string", max_length=80, description="The email address of the customer."),
        F(name="website", type="string", max_length=80, description="The website URL of the customer."),
        F(name="salespersonCode", type="string", max_length=20, description="The code of the salesperson assigned to the customer."),
        F(name="balanceDue", type="decimal", read_only=True, description="The total balance due from the customer. Calculated from outstanding ledger entries."),
        F(name="creditLimit", type="decimal", description="The credit limit for the customer."),
        F(name="taxLiable", type="boolean", description="Whether the customer is tax liable."),
        F(name="taxAreaId", type="guid", description="The unique identifier of the tax area for the customer."),
        F(name="taxAreaDisplayName", type="string", read_only=True, description="The display name of the tax area for the customer."),
        F(name="taxRegistrationNumber", type="string", max_length=20, description="The tax registration number (VAT registration number) of the customer."),
        F(name="currencyId", type="guid", description="The unique identifier of the currency used for the customer."),
        F(name="currencyCode", type="string", max_length=10, description="The code of the default currency for the customer (e.g. USD, EUR)."),
        F(name="paymentTermsId", type="guid", description="The unique identifier of the payment terms for the customer."),
        F(name="shipmentMethodId", type="guid", description="The unique identifier of the shipment method for the customer."),
        F(name="paymentMethodId", type="guid", description="The unique identifier of the payment method for the customer."),
        F(name="blocked", type="enum", enum_values=[" ", "Ship", "Invoice", "All"], description="Specifies which transactions with the customer are blocked. Blank means not blocked."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the customer was last modified."),
    ],
    navigation_properties=[
        Nav(name="currency", target_entity="currency", description="The default currency for the customer."),
        Nav(name="paymentTerm", target_entity="paymentTerm", description="The payment terms for the customer."),
        Nav(name="shipmentMethod", target_entity="shipmentMethod", description="The shipment method for the customer."),
        Nav(name="paymentMethod", target_entity="paymentMethod", description="The payment method for the customer."),
        Nav(name="customerFinancialDetail", target_entity="customerFinancialDetail", description="The financial details of the customer."),
        Nav(name="picture", target_entity="picture", description="The picture associated with the customer."),
        Nav(name="defaultDimensions", target_entity="defaultDimension", is_collection=True, description="The default dimensions for the customer."),
        Nav(name="agedAccountsReceivable", target_entity="agedAccountsReceivable", description="The aged accounts receivable for the customer."),
        Nav(name="contactsInformation", target_entity="contactInformation", is_collection=True, description="The contact information entries for the customer."),
    ],
)

VENDOR = EntityDefinition(
    name="vendor",
    plural_name="vendors",
    api_path="vendors",
    description="Represents a vendor in Business Central. Vendors are parties from which the company purchases goods or services.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the vendor."),
        F(name="number", type="string", max_length=20, description="The vendor number. Auto-generated if not specified on creation."),
        F(name="displayName", type="string", required=True, max_length=100, description="The vendor display name."),
        F(name="addressLine1", type="string", max_length=100, description="The first line of the vendor address."),
        F(name="addressLine2", type="string", max_length=50, description="The second line of the vendor address."),
        F(name="city", type="string", max_length=30, description="The city of the vendor address."),
        F(name="state", type="string", max_length=30, description="The state or province of the vendor address."),
        F(name="country", type="string", max_length=10, description="The country/region code of the vendor address."),
        F(name="postalCode", type="string", max_length=20, description="The postal or ZIP code of the vendor address."),
        F(name="phoneNumber", type="string", max_length=30, description="The phone number of the vendor."),
        F(name="email", type="string", max_length=80, description="The email address of the vendor."),
        F(name="website", type="string", max_length=80, description="The website URL of the vendor."),
        F(name="taxRegistrationNumber", type="string", max_length=20, description="The tax registration number (VAT registration number) of the vendor."),
        F(name="currencyId", type="guid", description="The unique identifier of the currency used for the vendor."),
        F(name="currencyCode", type="string", max_length=10, description="The code of the default currency for the vendor (e.g. USD, EUR)."),
        F(name="paymentTermsId", type="guid", description="The unique identifier of the payment terms for the vendor."),
        F(name="paymentMethodId", type="guid", description="The unique identifier of the payment method for the vendor."),
        F(name="taxLiable", type="boolean", description="Whether the vendor is tax liable."),
        F(name="blocked", type="enum", enum_values=[" ", "Payment", "All"], description="Specifies which transactions with the vendor are blocked. Blank means not blocked."),
        F(name="balance", type="decimal", read_only=True, description="The total balance owed to the vendor. Calculated from outstanding ledger entries."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the vendor was last modified."),
    ],
    navigation_properties=[
        Nav(name="currency", target_entity="currency", description="The default currency for the vendor."),
        Nav(name="paymentTerm", target_entity="paymentTerm", description="The payment terms for the vendor."),
        Nav(name="paymentMethod", target_entity="paymentMethod", description="The payment method for the vendor."),
        Nav(name="picture", target_entity="picture", description="The picture associated with the vendor."),
        Nav(name="defaultDimensions", target_entity="defaultDimension", is_collection=True, description="The default dimensions for the vendor."),
    ],
)

ITEM = EntityDefinition(
    name="item",
    plural_name="items",
    api_path="items",
    description="Represents an item (product or service) in Business Central. Items are goods or services that are bought, sold, or consumed.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the item."),
        F(name="number", type="string", max_length=20, description="The item number. Auto-generated if not specified on creation."),
        F(name="displayName", type="string", required=True, max_length=100, description="The display name / description of the item."),
        F(name="displayName2", type="string", max_length=50, description="The additional description of the item."),
        F(name="type", type="enum", enum_values=["Inventory", "Service", "Non-Inventory"],
          description="The type of the item: Inventory items are physical goods tracked in stock, Service items are non-physical labor or services, Non-Inventory items are physical goods not tracked in stock."),
        F(name="itemCategoryId", type="guid", description="The unique identifier of the item category."),
        F(name="itemCategoryCode", type="string", max_length=20, description="The code of the item category."),
        F(name="blocked", type="boolean", description="Whether the item is blocked. A blocked item cannot be used in transactions."),
        F(name="gtin", type="string", max_length=14, description="The Global Trade Item Number (barcode) for the item."),
        F(name="inventory", type="decimal", read_only=True, description="The current inventory quantity on hand. Calculated from item ledger entries."),
        F(name="unitPrice", type="decimal", description="The default unit sales price of the item."),
        F(name="priceIncludesTax", type="boolean", description="Whether the unit price includes tax (VAT)."),
        F(name="unitCost", type="decimal", description="The unit cost of the item."),
        F(name="taxGroupId", type="guid", description="The unique identifier of the tax group for the item."),
        F(name="taxGroupCode", type="string", max_length=20, description="The code of the tax group for the item."),
        F(name="baseUnitOfMeasureId", type="guid", description="The unique identifier of the base unit of measure."),
        F(name="baseUnitOfMeasureCode", type="string", max_length=10, description="The code of the base unit of measure for the item (e.g. PCS, KG)."),
        F(name="generalProductPostingGroupId", type="guid", description="The unique identifier of the general product posting group."),
        F(name="generalProductPostingGroupCode", type="string", max_length=20, description="The code of the general product posting group."),
        F(name="inventoryPostingGroupId", type="guid", description="The unique identifier of the inventory posting group."),
        F(name="inventoryPostingGroupCode", type="string", max_length=20, description="The code of the inventory posting group."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the item was last modified."),
    ],
    navigation_properties=[
        Nav(name="itemCategory", target_entity="itemCategory", description="The category of the item."),
        Nav(name="unitOfMeasure", target_entity="unitOfMeasure", description="The base unit of measure for the item."),
        Nav(name="picture", target_entity="picture", description="The picture associated with the item."),
        Nav(name="defaultDimensions", target_entity="defaultDimension", is_collection=True, description="The default dimensions for the item."),
        Nav(name="itemVariants", target_entity="itemVariant", is_collection=True, description="The variants of the item."),
    ],
)

CONTACT = EntityDefinition(
    name="contact",
    plural_name="contacts",
    api_path="contacts",
    description="Represents a contact in Business Central. Contacts are people or companies with whom the business has a relationship.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the contact."),
        F(name="number", type="string", max_length=20, description="The contact number."),
        F(name="type", type="enum", enum_values=["Company", "Person"], description="The type of the contact."),
        F(name="displayName", type="string", max_length=100, description="The display name of the contact."),
        F(name="companyName", type="string", max_length=100, description="The company name associated with the contact. For person contacts, this is the company they belong to."),
        F(name="companyNumber", type="string", max_length=20, description="The company contact number."),
        F(name="businessRelation", type="string", max_length=10, description="The business relation of the contact (e.g. Customer, Vendor, Bank)."),
        F(name="addressLine1", type="string", max_length=100, description="The first line of the contact address."),
        F(name="addressLine2", type="string", max_length=50, description="The second line of the contact address."),
        F(name="city", type="string", max_length=30, description="The city of the contact address."),
        F(name="state", type="string", max_length=30, description="The state of the contact address."),
        F(name="country", type="string", max_length=10, description="The country/region code of the contact address."),
        F(name="postalCode", type="string", max_length=20, description="The postal code of the contact address."),
        F(name="phoneNumber", type="string", max_length=30, description="The phone number of the contact."),
        F(name="mobilePhoneNumber", type="string", max_length=30, description="The mobile phone number of the contact."),
        F(name="email", type="string", max_length=80, description="The email address of the contact."),
        F(name="website", type="string", max_length=80, description="The website URL of the contact."),
        F(name="searchName", type="string", max_length=100, description="The search name used for finding the contact."),
        F(name="privacyBlocked", type="boolean", description="Whether the contact is privacy blocked due to GDPR or similar regulations."),
        F(name="lastInteractionDate", type="date", read_only=True, description="The date of the last interaction with the contact."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the contact was last modified."),
    ],
)
