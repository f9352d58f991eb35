"""
General ledger, journals, dimensions, bank accounts and aging reports.
"""

from ..models import BoundAction, EntityDefinition, FieldDefinition as F, NavigationProperty as Nav


ACCOUNT_TYPES = ["G/L Account", "Customer", "Vendor", "Bank Account", "Fixed Asset", "IC Partner", "Employee"]


JOURNAL = EntityDefinition(
    name="journal",
    plural_name="journals",
    api_path="journals",
    description="Represents a general journal in Business Central. Journals are used to post financial transactions directly to general ledger accounts.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the journal."),
        F(name="code", type="string", max_length=10, description="The code of the journal."),
        F(name="displayName", type="string", max_length=80, description="The display name of the journal."),
        F(name="balancingAccountId", type="guid", description="The unique identifier of the balancing account for the journal."),
        F(name="balancingAccountNumber", type="string", max_length=20, description="The number of the balancing account."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the journal was last modified."),
    ],
    navigation_properties=[
        Nav(name="journalLines", target_entity="journalLine", is_collection=True, description="The journal lines in this journal."),
        Nav(name="account", target_entity="account", description="The balancing G/L account for the journal."),
    ],
    bound_actions=[
        BoundAction(name="post", nav_path="Microsoft.NAV.post",
                    description="Posts all journal lines in the journal. This creates ledger entries for all lines."),
    ],
)

JOURNAL_LINE = EntityDefinition(
    name="journalLine",
    plural_name="journalLines",
    api_path="journalLines",
    description="Represents a journal line in Business Central. Journal lines specify individual financial transactions within a journal.",
    parent_entity="journal",
    parent_navigation_property="journalLines",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the journal line."),
        F(name="journalId", type="guid", description="The unique identifier of the parent journal."),
        F(name="journalDisplayName", type="string", read_only=True, description="The display name of the parent journal."),
        F(name="lineNumber", type="number", description="The line number of the journal line."),
        F(name="accountType", type="enum", enum_values=ACCOUNT_TYPES, description="The type of account for the journal line."),
        F(name="accountId", type="guid", description="The unique identifier of the account."),
        F(name="accountNumber", type="string", max_length=20, description="The number of the account."),
        F(name="postingDate", type="date", description="The posting date for the journal line."),
        F(name="documentNumber", type="string", max_length=20, description="The document number for the journal line."),
        F(name="externalDocumentNumber", type="string", max_length=35, description="The external document number."),
        F(name="amount", type="decimal",
          description="The amount for the journal line. Positive values represent debits, negative values represent credits."),
        F(name="description", type="string", max_length=100, description="The description of the journal line."),
        F(name="comment", type="string", max_length=250, description="A comment for the journal line."),
        F(name="taxCode", type="string", max_length=20, description="The tax code for the journal line."),
        F(name="balanceAccountType", type="enum", enum_values=ACCOUNT_TYPES, description="The type of the balancing account."),
        F(name="balancingAccountId", type="guid", description="The unique identifier of the balancing account."),
        F(name="balancingAccountNumber", type="string", max_length=20, description="The number of the balancing account."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the journal line was last modified."),
    ],
    navigation_properties=[
        Nav(name="account", target_entity="account", description="The G/L account for the journal line."),
        Nav(name="attachments", target_entity="attachment", is_collection=True, description="The file attachments for the journal line."),
        Nav(name="dimensionSetLines", target_entity="dimensionSetLine", is_collection=True, description="The dimension set lines for the journal line."),
    ],
)

ACCOUNT = EntityDefinition(
    name="account",
    plural_name="accounts",
    api_path="accounts",
    description="Represents a general ledger (G/L) account in Business Central. Accounts are used in the chart of accounts for financial reporting and posting.",
    is_read_only=True,
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the account."),
        F(name="number", type="string", read_only=True, description="The account number in the chart of accounts."),
        F(name="displayName", type="string", read_only=True, description="The display name of the account."),
        F(name="category", type="string", read_only=True,
          description="The account category (e.g. Assets, Liabilities, Equity, Income, Cost of Goods Sold, Expense)."),
        F(name="subCategory", type="string", read_only=True, description="The account sub-category for more detailed classification."),
        F(name="blocked", type="boolean", read_only=True, description="Whether the account is blocked. Blocked accounts cannot be used for posting."),
        F(name="accountType", type="enum", read_only=True, enum_values=["Posting", "Heading", "Total", "Begin-Total", "End-Total"],
          description="The type of account. Only Posting accounts can have entries posted to them."),
        F(name="directPosting", type="boolean", read_only=True, description="Whether direct posting is allowed to this account from journal lines."),
        F(name="netChange", type="decimal", read_only=True, description="The net change of the account for the current period."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the account was last modified."),
    ],
)

GENERAL_LEDGER_ENTRY = EntityDefinition(
    name="generalLedgerEntry",
    plural_name="generalLedgerEntries",
    api_path="generalLedgerEntries",
    description="Represents a general ledger entry in Business Central. GL entries are the core financial records created when transactions are posted.",
    is_read_only=True,
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the general ledger entry."),
        F(name="entryNumber", type="number", read_only=True, description="The sequential entry number of the GL entry."),
        F(name="postingDate", type="date", read_only=True, description="The posting date of the GL entry."),
        F(name="documentNumber", type="string", read_only=True, description="The document number associated with the GL entry."),
        F(name="documentType", type="string", read_only=True,
          description="The type of document that created the GL entry (e.g. Invoice, Payment, Credit Memo)."),
        F(name="accountId", type="guid", read_only=True, description="The unique identifier of the G/L account."),
        F(name="accountNumber", type="string", read_only=True, description="The number of the G/L account."),
        F(name="description", type="string", read_only=True, description="The description of the GL entry."),
        F(name="debitAmount", type="decimal", read_only=True, description="The debit amount of the GL entry."),
        F(name="creditAmount", type="decimal", read_only=True, description="The credit amount of the GL entry."),
        F(name="additionalCurrencyDebitAmount", type="decimal", read_only=True, description="The debit amount in the additional reporting currency."),
        F(name="additionalCurrencyCreditAmount", type="decimal", read_only=True, description="The credit amount in the additional reporting currency."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the GL entry was last modified."),
    ],
    navigation_properties=[
        Nav(name="dimensionSetLines", target_entity="dimensionSetLine", is_collection=True, description="The dimension set lines for the GL entry."),
        Nav(name="account", target_entity="account", description="The G/L account for the entry."),
    ],
)

DIMENSION = EntityDefinition(
    name="dimension",
    plural_name="dimensions",
    api_path="dimensions",
    description="Represents a dimension in Business Central. Dimensions are used to categorize and analyze transactions by attributes such as department, project, or location.",
    is_read_only=True,
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the dimension."),
        F(name="code", type="string", read_only=True, description="The code of the dimension (e.g. DEPARTMENT, PROJECT)."),
        F(name="displayName", type="string", read_only=True, description="The display name of the dimension."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the dimension was last modified."),
    ],
    navigation_properties=[
        Nav(name="dimensionValues", target_entity="dimensionValue", is_collection=True, description="The available values for this dimension."),
    ],
)

DIMENSION_VALUE = EntityDefinition(
    name="dimensionValue",
    plural_name="dimensionValues",
    api_path="dimensionValues",
    description="Represents a dimension value in Business Central. Dimension values are the specific values available for a dimension (e.g. 'Sales' for the DEPARTMENT dimension).",
    is_read_only=True,
    parent_entity="dimension",
    parent_navigation_property="dimensionValues",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the dimension value."),
        F(name="code", type="string", read_only=True, description="The code of the dimension value."),
        F(name="dimensionId", type="guid", read_only=True, description="The unique identifier of the parent dimension."),
        F(name="displayName", type="string", read_only=True, description="The display name of the dimension value."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the dimension value was last modified."),
    ],
)

BANK_ACCOUNT = EntityDefinition(
    name="bankAccount",
    plural_name="bankAccounts",
    api_path="bankAccounts",
    description="Represents a bank account in Business Central. Bank accounts are used to track the company's bank balances and transactions.",
    fields=[
        F(name="id", type="guid", read_only=True, description="The unique identifier for the bank account."),
        F(name="number", type="string", max_length=20, description="The bank account number identifier in Business Central."),
        F(name="displayName", type="string", max_length=100, description="The display name of the bank account."),
        F(name="bankAccountNumber", type="string", max_length=30, description="The actual bank account number at the financial institution."),
        F(name="blocked", type="boolean", description="Whether the bank account is blocked. Blocked bank accounts cannot be used in transactions."),
        F(name="currencyCode", type="string", max_length=10, description="The currency code of the bank account."),
        F(name="iban", type="string", max_length=50, description="The International Bank Account Number (IBAN) of the bank account."),
        F(name="intercompanyEnabled", type="boolean", description="Whether the bank account is enabled for intercompany transactions."),
        F(name="lastModifiedDateTime", type="datetime", read_only=True, description="The date and time the bank account was last modified."),
    ],
)


def _aging_fields(party: str, direction: str):
    return [
        F(name=f"{party}Id", type="guid", read_only=True, description=f"The unique identifier of the {party}."),
        F(name=f"{party}Number", type="string", read_only=True, description=f"The number of the {party}."),
        F(name="name", type="string", read_only=True, description=f"The name of the {party}."),
        F(name="currencyCode", type="string", read_only=True, description="The currency code for the amounts."),
        F(name="balanceDue", type="decimal", read_only=True, description=f"The total balance due {direction} the {party}."),
        F(name="currentAmount", type="decimal", read_only=True, description="The amount that is current (not yet due)."),
        F(name="period1Amount", type="decimal", read_only=True, description="The amount in the first aging period."),
        F(name="period2Amount", type="decimal", read_only=True, description="The amount in the second aging period."),
        F(name="period3Amount", type="decimal", read_only=True, description="The amount in the third aging period (oldest)."),
        F(name="agedAsOfDate", type="date", read_only=True, description="The date the aging was calculated as of."),
        F(name="periodLengthFilter", type="string", read_only=True,
          description="The date formula defining the length of each aging period (e.g. 30D for 30-day periods)."),
    ]


AGED_ACCOUNTS_RECEIVABLE = EntityDefinition(
    name="agedAccountsReceivable",
    plural_name="agedAccountsReceivable",
    api_path="agedAccountsReceivable",
    description="Represents aged accounts receivable data in Business Central. Provides aging analysis of customer balances, showing how long amounts have been outstanding.",
    is_read_only=True,
    fields=_aging_fields("customer", "from"),
)

AGED_ACCOUNTS_PAYABLE = EntityDefinition(
    name="agedAccountsPayable",
    plural_name="agedAccountsPayable",
    api_path="agedAccountsPayable",
    description="Represents aged accounts payable data in Business Central. Provides aging analysis of vendor balances, showing how long amounts have been outstanding.",
    is_read_only=True,
    fields=_aging_fields("vendor", "to"),
)
