"""
Purchase document lines.
"""

from ..models import EntityDefinition, FieldDefinition as F


PURCHASE_INVOICE_LINE = EntityDefinition(
    name="purchaseInvoiceLine",
    plural_name="purchaseInvoiceLines",
    api_path="purchaseInvoiceLines",
    description="Represents a line item on a purchase invoice in Business Central.",
    parent_entity="purchaseInvoice",
    parent_navigation_property="purchaseInvoiceLines",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the purchase invoice line."),
        F(name="documentId", type="guid", description="The unique identifier of the parent purchase invoice."),
        F(name="sequence", type="number", description="The sequence number of the line."),
        F(name="itemId", type="guid", description="The unique identifier of the item. Used when lineType is Item."),
        F(name="accountId", type="guid", description="The unique identifier of the account. Used when lineType is Account."),
        F(name="lineType", type="enum", enum_values=["Comment", "Account", "Item", "Resource", "Fixed Asset", "Charge"],
          description="The type of the purchase invoice line."),
        F(name="lineObjectNumber", type="string", max_length=20, description="The number of the item or account on the line."),
        F(name="description", type="string", max_length=100, description="The description of the line item."),
        F(name="unitOfMeasureId", type="guid", description="The unique identifier of the unit of measure."),
        F(name="unitOfMeasureCode", type="string", max_length=10, description="The code of the unit of measure."),
        F(name="quantity", type="decimal", description="The quantity of the item or service."),
        F(name="directUnitCost", type="decimal", description="The direct unit cost of the item or service."),
        F(name="discountAmount", type="decimal", description="The line discount amount."),
        F(name="discountPercent", type="decimal", description="The line discount percentage."),
        F(name="discountAppliedBeforeTax", type="boolean", description="Whether the discount is applied before tax."),
        F(name="amountExcludingTax", type="decimal", description="The line amount excluding tax."),
        F(name="taxCode", type="string", max_length=20, description="The tax code for the line."),
        F(name="taxPercent", type="decimal", description="The tax percentage for the line."),
        F(name="totalTaxAmount", type="decimal", read_only=True, description="The total tax amount for the line."),
        F(name="amountIncludingTax", type="decimal", description="The line amount including tax."),
        F(name="invoiceDiscountAllocation", type="decimal", read_only=True, description="The invoice discount allocated to this line."),
        F(name="netAmount", type="decimal", read_only=True, description="The net amount after all discounts."),
        F(name="netTaxAmount", type="decimal", read_only=True, description="The net tax amount for the line."),
        F(name="netAmountIncludingTax", type="decimal", read_only=True, description="The net amount including tax."),
        F(name="expectedReceiptDate", type="date", description="The expected receipt date for the line."),
        F(name="itemVariantId", type="guid", description="The unique identifier of the item variant."),
        F(name="locationId", type="guid", description="The unique identifier of the location."),
    ],
)
