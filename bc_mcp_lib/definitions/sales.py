"""
Sales documents and their lines.
"""

from ..models import BoundAction, EntityDefinition, FieldDefinition as F, NavigationProperty as Nav


SALES_INVOICE = EntityDefinition(
    name="salesInvoice",
    plural_name="salesInvoices",
    api_path="salesInvoices",
    description="Represents a sales invoice in Business Central. Sales invoices are used to bill customers for goods and services sold.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the sales invoice."),
        F(name="number", type="string", max_length=20, description="The sales invoice number. Auto-generated if not specified."),
        F(name="externalDocumentNumber", type="string", max_length=35, description="The external document number, such as the customer's purchase order number."),
        F(name="invoiceDate", type="date", description="The date of the sales invoice."),
        F(name="postingDate", type="date", description="The date the sales invoice will be posted."),
        F(name="dueDate", type="date", description="The date the payment is due."),
        F(name="promisedPayDate", type="date", description="The date the customer promised to pay."),
        F(name="customerPurchaseOrderReference", type="string", max_length=35, description="The customer's purchase order reference."),
        F(name="customerId", type="guid", description="The unique identifier of the customer."),
        F(name="customerNumber", type="string", max_length=20, description="The number of the customer."),
        F(name="customerName", type="string", max_length=100, description="The name of the customer."),
        F(name="billToName", type="string", max_length=100, description="The bill-to name."),
        F(name="billToCustomerId", type="guid", description="The unique identifier of the bill-to customer."),
        F(name="billToCustomerNumber", type="string", max_length=20, description="The number of the bill-to customer."),
        F(name="shipToName", type="string", max_length=100, description="The ship-to name."),
        F(name="shipToContact", type="string", max_length=100, description="The ship-to contact person."),
        F(name="sellToAddressLine1", type="string", max_length=100, description="The first line of the sell-to address."),
        F(name="sellToAddressLine2", type="string", max_length=50, description="The second line of the sell-to address."),
        F(name="sellToCity", type="string", max_length=30, description="The city of the sell-to address."),
        F(name="sellToCountry", type="string", max_length=10, description="The country/region code of the sell-to address."),
        F(name="sellToState", type="string", max_length=30, description="The state of the sell-to address."),
        F(name="sellToPostCode", type="string", max_length=20, description="The postal code of the sell-to address."),
        F(name="billToAddressLine1", type="string", max_length=100, description="The first line of the bill-to address."),
        F(name="billToAddressLine2", type="string", max_length=50, description="The second line of the bill-to address."),
        F(name="billToCity", type="string", max_length=30, description="The city of the bill-to address."),
        F(name="billToCountry", type="string", max_length=10, description="The country/region code of the bill-to address."),
        F(name="billToState", type="string", max_length=30, description="The state of the bill-to address."),
        F(name="billToPostCode", type="string", max_length=20, description="The postal code of the bill-to address."),
        F(name="shipToAddressLine1", type="string", max_length=100, description="The first line of the ship-to address."),
        F(name="shipToAddressLine2", type="string", max_length=50, description="The second line of the ship-to address."),
        F(name="shipToCity", type="string", max_length=30, description="The city of the ship-to address."),
        F(name="shipToCountry", type="string", max_length=10, description="The country/region code of the ship-to address."),
        F(name="shipToState", type="string", max_length=30, description="The state of the ship-to address."),
        F(name="shipToPostCode", type="string", max_length=20, description="The postal code of the ship-to address."),
        F(name="shortcutDimension1Code", type="string", max_length=20, description="The code of the first shortcut dimension."),
        F(name="shortcutDimension2Code", type="string", max_length=20, description="The code of the second shortcut dimension."),
        F(name="currencyId", type="guid", description="The unique identifier of the currency."),
        F(name="currencyCode", type="string", max_length=10, description="The currency code for the invoice."),
        F(name="orderId", type="guid", read_only=True, description="The unique identifier of the sales order this invoice was created from, if any."),
        F(name="orderNumber", type="string", read_only=True, max_length=20, description="The number of the sales order this invoice was created from, if any."),
        F(name="pricesIncludeTax", type="boolean", read_only=True, description="Whether prices on the invoice include tax."),
        F(name="paymentTermsId", type="guid", description="The unique identifier of the payment terms."),
        F(name="shipmentMethodId", type="guid", description="The unique identifier of the shipment method."),
        F(name="salesperson", type="string", max_length=20, description="The salesperson code assigned to the invoice."),
        F(name="discountAmount", type="decimal", description="The invoice discount amount."),
        F(name="discountAppliedBeforeTax", type="boolean", description="Whether the discount is applied before tax."),
        F(name="totalAmountExcludingTax", type="decimal", read_only=True, description="The total amount of the invoice excluding tax."),
        F(name="totalTaxAmount", type="decimal", read_only=True, description="The total tax amount for the invoice."),
        F(name="totalAmountIncludingTax", type="decimal", read_only=True, description="The total amount of the invoice including tax."),
        F(name="remainingAmount", type="decimal", read_only=True, description="The remaining amount to be paid on the invoice."),
        F(name="disputeStatusId", type="guid", description="The unique identifier of the dispute status."),
        F(name="disputeStatus", type="string", max_length=50, description="The dispute status of the invoice."),
        F(name="status", type="enum", enum_values=[" ", "Draft", "In Review", "Open", "Paid", "Canceled", "Corrective"],
          description="The status of the sales invoice."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the sales invoice was last modified."),
        F(name="phoneNumber", type="string", max_length=30, description="The phone number associated with the invoice."),
        F(name="email", type="string", max_length=80, description="The email address associated with the invoice."),
    ],
    navigation_properties=[
        Nav(name="customer", target_entity="customer", description="The customer for the sales invoice."),
        Nav(name="currency", target_entity="currency", description="The currency for the sales invoice."),
        Nav(name="paymentTerm", target_entity="paymentTerm", description="The payment terms for the sales invoice."),
        Nav(name="shipmentMethod", target_entity="shipmentMethod", description="The shipment method for the sales invoice."),
        Nav(name="salesInvoiceLines", target_entity="salesInvoiceLine", is_collection=True, description="The line items of the sales invoice."),
        Nav(name="dimensionSetLines", target_entity="dimensionSetLine", is_collection=True, description="The dimension set lines for the sales invoice."),
        Nav(name="pdfDocument", target_entity="pdfDocument", description="The PDF document for the sales invoice."),
        Nav(name="attachments", target_entity="attachment", is_collection=True, description="The file attachments for the sales invoice."),
    ],
    bound_actions=[
        BoundAction(name="post", nav_path="Microsoft.NAV.post",
                    description="Posts the sales invoice. This creates a posted sales invoice and associated ledger entries."),
        BoundAction(name="postAndSend", nav_path="Microsoft.NAV.postAndSend",
                    description="Posts the sales invoice and sends it to the customer via email."),
        BoundAction(name="send", nav_path="Microsoft.NAV.send",
                    description="Sends the sales invoice to the customer via email."),
        BoundAction(name="cancel", nav_path="Microsoft.NAV.cancel",
                    description="Cancels the posted sales invoice by creating a corrective credit memo."),
        BoundAction(name="cancelAndSend", nav_path="Microsoft.NAV.cancelAndSend",
                    description="Cancels the posted sales invoice and sends the cancellation to the customer."),
        BoundAction(name="makeCorrectiveCreditMemo", nav_path="Microsoft.NAV.makeCorrectiveCreditMemo",
                    description="Creates a corrective credit memo for the posted sales invoice."),
    ],
)

SALES_INVOICE_LINE = EntityDefinition(
    name="salesInvoiceLine",
    plural_name="salesInvoiceLines",
    api_path="salesInvoiceLines",
    description="Represents a line item on a sales invoice in Business Central. Each line specifies an item, account, or charge being invoiced.",
    parent_entity="salesInvoice",
    parent_navigation_property="salesInvoiceLines",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the sales invoice line."),
        F(name="documentId", type="guid", description="The unique identifier of the parent sales invoice."),
        F(name="sequence", type="number", description="The sequence number of the line."),
        F(name="itemId", type="guid", description="The unique identifier of the item. Used when lineType is Item."),
        F(name="accountId", type="guid", description="The unique identifier of the account. Used when lineType is Account."),
        F(name="lineType", type="enum", enum_values=["Comment", "Account", "Item", "Resource", "Fixed Asset", "Charge"],
          description="The type of the sales invoice line."),
        F(name="lineObjectNumber", type="string", max_length=20, description="The number of the item or account on the line."),
        F(name="description", type="string", max_length=100, description="The description of the line item."),
        F(name="unitOfMeasureId", type="guid", description="The unique identifier of the unit of measure."),
        F(name="unitOfMeasureCode", type="string", max_length=10, description="The code of the unit of measure."),
        F(name="quantity", type="decimal", description="The quantity of the item or service."),
        F(name="unitPrice", type="decimal", description="The unit price of the item or service."),
        F(name="discountAmount", type="decimal", description="The line discount amount."),
        F(name="discountPercent", type="decimal", description="The line discount percentage."),
        F(name="discountAppliedBeforeTax", type="boolean", description="Whether the discount is applied before tax."),
        F(name="amountExcludingTax", type="decimal", description="The line amount excluding tax."),
        F(name="taxCode", type="string", max_length=20, description="The tax code for the line."),
        F(name="taxPercent", type="decimal", description="The tax percentage for the line."),
        F(name="totalTaxAmount", type="decimal", read_only=True, description="The total tax amount for the line."),
        F(name="amountIncludingTax", type="decimal", description="The line amount including tax."),
        F(name="invoiceDiscountAllocation", type="decimal", read_only=True, description="The invoice discount amount allocated to this line."),
        F(name="netAmount", type="decimal", read_only=True, description="The net amount of the line after all discounts."),
        F(name="netTaxAmount", type="decimal", read_only=True, description="The net tax amount for the line."),
        F(name="netAmountIncludingTax", type="decimal", read_only=True, description="The net amount including tax."),
        F(name="shipmentDate", type="date", description="The planned shipment date for the line."),
        F(name="itemVariantId", type="guid", description="The unique identifier of the item variant."),
        F(name="locationId", type="guid", description="The unique identifier of the location."),
    ],
)

SALES_ORDER_LINE = EntityDefinition(
    name="salesOrderLine",
    plural_name="salesOrderLines",
    api_path="salesOrderLines",
    description="Represents a line item on a sales order in Business Central. Each line specifies an item, account, or charge being sold.",
    parent_entity="salesOrder",
    parent_navigation_property="salesOrderLines",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the sales order line."),
        F(name="documentId", type="guid", description="The unique identifier of the parent sales order."),
        F(name="sequence", type="number", description="The sequence number of the line."),
        F(name="itemId", type="guid", description="The unique identifier of the item on the line. Used when lineType is Item."),
        F(name="accountId", type="guid", description="The unique identifier of the account on the line. Used when lineType is Account."),
        F(name="lineType", type="enum", enum_values=["Comment", "Account", "Item", "Resource", "Fixed Asset", "Charge"],
          description="The type of the sales order line."),
        F(name="lineObjectNumber", type="string", max_length=20, description="The number of the item or account on the line."),
        F(name="description", type="string", max_length=100, description="The description of the line item."),
        F(name="unitOfMeasureId", type="guid", description="The unique identifier of the unit of measure for the line."),
        F(name="unitOfMeasureCode", type="string", max_length=10, description="The code of the unit of measure for the line."),
        F(name="quantity", type="decimal", description="The quantity of the item or service on the line."),
        F(name="unitPrice", type="decimal", description="The unit price of the item or service."),
        F(name="discountAmount", type="decimal", description="The line discount amount."),
        F(name="discountPercent", type="decimal", description="The line discount percentage."),
        F(name="discountAppliedBeforeTax", type="boolean", description="Whether the discount is applied before tax calculation."),
        F(name="amountExcludingTax", type="decimal", description="The line amount excluding tax."),
        F(name="taxCode", type="string", max_length=20, description="The tax code for the line."),
        F(name="taxPercent", type="decimal", description="The tax percentage for the line."),
        F(name="totalTaxAmount", type="decimal", read_only=True, description="The total tax amount for the line."),
        F(name="amountIncludingTax", type="decimal", description="The line amount including tax."),
        F(name="invoiceDiscountAllocation", type="decimal", read_only=True, description="The invoice discount amount allocated to this line."),
        F(name="netAmount", type="decimal", read_only=True, description="The net amount of the line after all discounts."),
        F(name="netTaxAmount", type="decimal", read_only=True, description="The net tax amount for the line."),
        F(name="netAmountIncludingTax", type="decimal", read_only=True, description="The net amount of the line including tax."),
        F(name="shipmentDate", type="date", description="The planned shipment date for the line."),
        F(name="shippedQuantity", type="decimal", read_only=True, description="The quantity already shipped for this line."),
        F(name="invoicedQuantity", type="decimal", read_only=True, description="The quantity already invoiced for this line."),
        F(name="invoiceQuantity", type="decimal", description="The quantity to invoice."),
        F(name="shipQuantity", type="decimal", description="The quantity to ship."),
        F(name="itemVariantId", type="guid", description="The unique identifier of the item variant."),
        F(name="locationId", type="guid", description="The unique identifier of the location for the line."),
    ],
)

SALES_QUOTE_LINE = EntityDefinition(
    name="salesQuoteLine",
    plural_name="salesQuoteLines",
    api_path="salesQuoteLines",
    description="Represents a line item on a sales quote in Business Central. Each line specifies an item, account, or charge being quoted.",
    parent_entity="salesQuote",
    parent_navigation_property="salesQuoteLines",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the sales quote line."),
        F(name="documentId", type="guid", description="The unique identifier of the parent sales quote."),
        F(name="sequence", type="number", description="The sequence number of the line."),
        F(name="itemId", type="guid", description="The unique identifier of the item. Used when lineType is Item."),
        F(name="accountId", type="guid", description="The unique identifier of the account. Used when lineType is Account."),
        F(name="lineType", type="enum", enum_values=["Comment", "Account", "Item", "Resource", "Fixed Asset", "Charge"],
          description="The type of the sales quote line."),
        F(name="lineObjectNumber", type="string", max_length=20, description="The number of the item or account on the line."),
        F(name="description", type="string", max_length=100, description="The description of the line item."),
        F(name="unitOfMeasureId", type="guid", description="The unique identifier of the unit of measure."),
        F(name="unitOfMeasureCode", type="string", max_length=10, description="The code of the unit of measure."),
        F(name="quantity", type="decimal", description="The quantity of the item or service."),
        F(name="unitPrice", type="decimal", description="The unit price of the item or service."),
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
        F(name="itemVariantId", type="guid", description="The unique identifier of the item variant."),
        F(name="locationId", type="guid", description="The unique identifier of the location."),
    ],
)
