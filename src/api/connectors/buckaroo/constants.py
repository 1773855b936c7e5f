"""Vocabulário do protocolo Buckaroo (nomes, grupos e valores fixos).

Os nomes de parâmetros, GroupType e GroupID são definidos pelo schema do
provider e precisam ser reproduzidos byte a byte. Toda codificação e
decodificação deve passar por esta tabela, nunca por literais soltos.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum, StrEnum

# Esquema do header Authorization
AUTHORIZATION_SCHEME = "hmac"

# Cultura padrão do devedor (Person/Culture)
DEFAULT_CULTURE = "nl-NL"

SUBSCRIPTION_GROUP_ID = "subscription"

# Valores fixos do envelope de transação
CURRENCY = "EUR"
START_RECURRENT = "true"
CONTINUE_ON_INCOMPLETE = "1"
AMOUNT_DEBIT = Decimal("10.00")
AMOUNT_CREDIT = Decimal("0")
INCLUDE_TRANSACTION = "true"
DEBTOR_COUNTRY = "NL"
TRANSACTION_VAT_PERCENTAGE = "21"
GENDER_PARAMETER = "Gender"
GENDER_UNSPECIFIED = "Other"

# Datas de rate plan no formato dd-MM-yyyy
DATE_FORMAT = "%d-%m-%Y"


class ServiceName(StrEnum):
    """Serviços Buckaroo utilizados."""

    CREDIT_MANAGEMENT = "CreditManagement3"
    SUBSCRIPTIONS = "Subscriptions"


class ServiceAction(StrEnum):
    """Ações por serviço."""

    DEBTOR_INFO = "DebtorInfo"
    CREATE_COMBINED_SUBSCRIPTION = "CreateCombinedSubscription"


class ProtocolField(Enum):
    """Tabela única: campo lógico -> (Name, GroupType, GroupID)."""

    # Lookup de devedor
    DEBTOR_CODE = ("DebtorCode", "Debtor", "")

    # Assinatura combinada
    INCLUDE_TRANSACTION = ("IncludeTransaction", "", "")
    CONFIGURATION_CODE = ("ConfigurationCode", "", "")

    # Devedor
    CODE = ("Code", "Debtor", "")
    FIRST_NAME = ("FirstName", "Person", "")
    LAST_NAME = ("LastName", "Person", "")
    CULTURE = ("Culture", "Person", "")
    STREET = ("Street", "Address", "")
    HOUSE_NUMBER = ("HouseNumber", "Address", "")
    HOUSE_NUMBER_SUFFIX = ("HouseNumberSuffix", "Address", "")
    ZIP_CODE = ("ZipCode", "Address", "")
    CITY = ("City", "Address", "")
    COUNTRY = ("Country", "Address", "")
    EMAIL = ("Email", "Email", "")
    MOBILE = ("Mobile", "Phone", "")

    # Cobrança (rate plan)
    RATE_PLAN_CODE = ("RatePlanCode", "AddRatePlan", SUBSCRIPTION_GROUP_ID)
    RATE_PLAN_CHARGE_CODE = ("RatePlanChargeCode", "AddRatePlanCharge", SUBSCRIPTION_GROUP_ID)
    PRICE_PER_UNIT = ("PricePerUnit", "AddRatePlanCharge", SUBSCRIPTION_GROUP_ID)
    VAT_PERCENTAGE = ("VatPercentage", "AddRatePlanCharge", SUBSCRIPTION_GROUP_ID)
    TRANSACTION_VAT_PERCENTAGE = ("TransactionVatPercentage", "", SUBSCRIPTION_GROUP_ID)
    START_DATE = ("StartDate", "AddRatePlan", SUBSCRIPTION_GROUP_ID)
    END_DATE = ("EndDate", "AddRatePlan", SUBSCRIPTION_GROUP_ID)

    # Somente em respostas de DebtorInfo
    SUBSCRIPTION_IDS = ("SubscriptionGuids", "", "")
    INVOICE_IDS = ("InvoiceNumbers", "", "")

    def __init__(self, field_name: str, group_type: str, group_id: str) -> None:
        self.field_name = field_name
        self.group_type = group_type
        self.group_id = group_id
