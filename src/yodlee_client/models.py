"""
Request and response payloads for the Yodlee REST API.

Response types are built with ``from_api_response``; a body whose shape
does not fit raises YodleeDecodeError and no partial object is returned.
"""

from dataclasses import dataclass, field
from typing import Any

from .decoding import (
    as_dict,
    as_list,
    dig_str,
    get_bool,
    get_dict,
    get_float,
    get_int,
    get_list,
    get_str,
)

PASSWORD_CREDENTIALS_TYPE = "com.yodlee.ext.login.PasswordCredentials"


@dataclass(frozen=True)
class Credentials:
    """Cobrand login and password."""

    login: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(login={self.login!r}, password='***')"


@dataclass
class TransactionSearchParams:
    """
    Arguments for executeUserSearchRequest.

    Defaults fetch every container type, results 1..500, in USD.
    """

    container_type: str = "All"
    higher_fetch_limit: str = "500"
    lower_fetch_limit: str = "1"
    ignore_user_input: str = "true"
    end_number: int = 500
    start_number: int = 1
    currency_code: str = "USD"

    def to_form(self) -> dict[str, Any]:
        """Form fields keyed by Yodlee's dotted request names."""
        return {
            "transactionSearchRequest.containerType": self.container_type,
            "transactionSearchRequest.higherFetchLimit": self.higher_fetch_limit,
            "transactionSearchRequest.lowerFetchLimit": self.lower_fetch_limit,
            "transactionSearchRequest.ignoreUserInput": self.ignore_user_input,
            "transactionSearchRequest.resultRange.endNumber": self.end_number,
            "transactionSearchRequest.resultRange.startNumber": self.start_number,
            "transactionSearchRequest.searchFilter.currencyCode": self.currency_code,
        }


# ----------------------------------------------------------------------------
# Site accounts
# ----------------------------------------------------------------------------


@dataclass
class ContainerInfo:
    asset_type: int = 0
    container_name: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "ContainerInfo":
        data = as_dict(data, "containerInfo")
        return cls(
            asset_type=get_int(data, "assetType"),
            container_name=get_str(data, "containerName"),
        )


@dataclass
class ContentServiceInfo:
    container_info: ContainerInfo
    content_service_id: int = 0
    site_id: int = 0

    @classmethod
    def from_api_response(cls, data: Any) -> "ContentServiceInfo":
        data = as_dict(data, "contentServiceInfo")
        return cls(
            container_info=ContainerInfo.from_api_response(data.get("containerInfo")),
            content_service_id=get_int(data, "contentServiceId"),
            site_id=get_int(data, "siteId"),
        )


@dataclass
class SiteInfo:
    """The financial institution site behind a site account."""

    base_url: str = ""
    default_display_name: str = ""
    default_org_display_name: str = ""
    content_service_infos: list[ContentServiceInfo] = field(default_factory=list)
    enabled_containers: list[ContainerInfo] = field(default_factory=list)
    is_custom: bool = False
    is_held: bool = False
    login_forms: list[Any] = field(default_factory=list)
    org_id: int = 0
    popularity: int = 0
    site_id: int = 0
    site_search_visibility: bool = False

    @classmethod
    def from_api_response(cls, data: Any) -> "SiteInfo":
        data = as_dict(data, "siteInfo")
        return cls(
            base_url=get_str(data, "baseUrl"),
            default_display_name=get_str(data, "defaultDisplayName"),
            default_org_display_name=get_str(data, "defaultOrgDisplayName"),
            content_service_infos=[
                ContentServiceInfo.from_api_response(item)
                for item in get_list(data, "contentServiceInfos")
            ],
            enabled_containers=[
                ContainerInfo.from_api_response(item)
                for item in get_list(data, "enabledContainers")
            ],
            is_custom=get_bool(data, "isCustom"),
            is_held=get_bool(data, "isHeld"),
            login_forms=get_list(data, "loginForms"),
            org_id=get_int(data, "orgId"),
            popularity=get_int(data, "popularity"),
            site_id=get_int(data, "siteId"),
            site_search_visibility=get_bool(data, "siteSearchVisibility"),
        )


@dataclass
class SiteRefreshInfo:
    code: int = 0
    next_update: int = 0
    no_of_retry: int = 0
    refresh_mode: str = ""
    refresh_mode_id: int = 0
    refresh_status: str = ""
    refresh_status_id: int = 0
    update_init_time: int = 0

    @classmethod
    def from_api_response(cls, data: Any) -> "SiteRefreshInfo":
        data = as_dict(data, "siteRefreshInfo")
        mode = get_dict(data, "siteRefreshMode")
        status = get_dict(data, "siteRefreshStatus")
        return cls(
            code=get_int(data, "code"),
            next_update=get_int(data, "nextUpdate"),
            no_of_retry=get_int(data, "noOfRetry"),
            refresh_mode=get_str(mode, "refreshMode"),
            refresh_mode_id=get_int(mode, "refreshModeId"),
            refresh_status=get_str(status, "siteRefreshStatus"),
            refresh_status_id=get_int(status, "siteRefreshStatusId"),
            update_init_time=get_int(data, "updateInitTime"),
        )


@dataclass
class SiteAccount:
    """A user's linked account at one site (getAllSiteAccounts entry)."""

    site_account_id: int
    site_info: SiteInfo
    site_refresh_info: SiteRefreshInfo
    created: str = ""
    credentials_changed_time: int = 0
    is_custom: bool = False
    retry_count: int = 0

    @property
    def display_name(self) -> str:
        return self.site_info.default_display_name

    @classmethod
    def from_api_response(cls, data: Any) -> "SiteAccount":
        data = as_dict(data, "siteAccount")
        return cls(
            site_account_id=get_int(data, "siteAccountId"),
            site_info=SiteInfo.from_api_response(data.get("siteInfo")),
            site_refresh_info=SiteRefreshInfo.from_api_response(data.get("siteRefreshInfo")),
            created=get_str(data, "created"),
            credentials_changed_time=get_int(data, "credentialsChangedTime"),
            is_custom=get_bool(data, "isCustom"),
            retry_count=get_int(data, "retryCount"),
        )

    @classmethod
    def list_from_api_response(cls, data: Any) -> list["SiteAccount"]:
        return [cls.from_api_response(item) for item in as_list(data, "siteAccounts")]


# ----------------------------------------------------------------------------
# Transactions
# ----------------------------------------------------------------------------


@dataclass
class Money:
    amount: float = 0.0
    currency_code: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "Money":
        data = as_dict(data, "money")
        return cls(
            amount=get_float(data, "amount"),
            currency_code=get_str(data, "currencyCode"),
        )


@dataclass
class TransactionAccount:
    """Account summary embedded in each transaction."""

    account_balance: Money
    account_name: str = ""
    account_number: str = ""
    display_name: str = ""
    item_account_id: int = 0
    item_account_status_id: int = 0
    site_name: str = ""
    sum_info_id: int = 0
    decryption_status: bool = False

    @classmethod
    def from_api_response(cls, data: Any) -> "TransactionAccount":
        data = as_dict(data, "account")
        return cls(
            account_balance=Money.from_api_response(data.get("accountBalance")),
            account_name=get_str(data, "accountName"),
            account_number=get_str(data, "accountNumber"),
            display_name=dig_str(data, "accountDisplayName", "defaultNormalAccountName"),
            item_account_id=get_int(data, "itemAccountId"),
            item_account_status_id=get_int(data, "itemAccountStatusId"),
            site_name=get_str(data, "siteName"),
            sum_info_id=get_int(data, "sumInfoId"),
            decryption_status=get_bool(data, "decryptionStatus"),
        )


@dataclass
class Transaction:
    """One transaction from a search result."""

    transaction_id: int
    container_type: str
    post_date: str
    amount: Money
    account: TransactionAccount
    description: str = ""
    simple_description: str = ""
    running_balance: float = 0.0
    price: Money | None = None
    category_id: int = 0
    category_name: str = ""
    transaction_type: str = ""
    transaction_type_id: int = 0
    transaction_base_type: str = ""
    transaction_base_type_id: int = 0
    status: str = ""
    status_id: int = 0
    is_business: bool = False
    is_medical: bool = False
    is_personal: bool = False
    is_reimbursable: bool = False
    is_taxable: bool = False
    transaction_posting_order: int = 0

    @classmethod
    def from_api_response(cls, data: Any) -> "Transaction":
        data = as_dict(data, "transaction")
        view_key = get_dict(data, "viewKey")
        description = get_dict(data, "description")
        category = get_dict(data, "category")
        status = get_dict(data, "status")
        return cls(
            transaction_id=get_int(view_key, "transactionId"),
            container_type=get_str(view_key, "containerType"),
            post_date=get_str(data, "postDate"),
            amount=Money.from_api_response(data.get("amount")),
            account=TransactionAccount.from_api_response(data.get("account")),
            description=get_str(description, "description"),
            simple_description=get_str(description, "simpleDescription"),
            running_balance=get_float(data, "runningBalance"),
            price=Money.from_api_response(data["price"]) if data.get("price") else None,
            category_id=get_int(category, "categoryId"),
            category_name=get_str(category, "categoryName"),
            transaction_type=get_str(data, "transactionType"),
            transaction_type_id=get_int(data, "transactionTypeId"),
            transaction_base_type=get_str(data, "transactionBaseType"),
            transaction_base_type_id=get_int(data, "transactionBaseTypeId"),
            status=get_str(status, "description"),
            status_id=get_int(status, "statusId"),
            is_business=get_bool(data, "isBusiness"),
            is_medical=get_bool(data, "isMedical"),
            is_personal=get_bool(data, "isPersonal"),
            is_reimbursable=get_bool(data, "isReimbursable"),
            is_taxable=get_bool(data, "isTaxable"),
            transaction_posting_order=get_int(data, "transactionPostingOrder"),
        )


@dataclass
class TransactionSearchResult:
    """Totals, hit count and the ordered transactions of one search."""

    count_of_all_transaction: int
    count_of_projected_txns: int
    number_of_hits: int
    search_identifier: str
    credit_total: Money
    debit_total: Money
    credit_total_projected: Money
    debit_total_projected: Money
    transactions: list[Transaction] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Any) -> "TransactionSearchResult":
        data = as_dict(data, "transactionSearchResult")
        search_result = get_dict(data, "searchResult")
        return cls(
            count_of_all_transaction=get_int(data, "countOfAllTransaction"),
            count_of_projected_txns=get_int(data, "countOfProjectedTxns"),
            number_of_hits=get_int(data, "numberOfHits"),
            search_identifier=dig_str(data, "searchIdentifier", "identifier"),
            credit_total=Money.from_api_response(data.get("creditTotalOfTxns")),
            debit_total=Money.from_api_response(data.get("debitTotalOfTxns")),
            credit_total_projected=Money.from_api_response(data.get("creditTotalOfProjectedTxns")),
            debit_total_projected=Money.from_api_response(data.get("debitTotalOfProjectedTxns")),
            transactions=[
                Transaction.from_api_response(item)
                for item in get_list(search_result, "transactions")
            ],
        )


# ----------------------------------------------------------------------------
# Registration
# ----------------------------------------------------------------------------


@dataclass
class PreferenceInfo:
    currency_code: str = ""
    currency_notation_type: str = ""
    date_format: str = ""
    decimal_separator: str = ""
    group_pattern: str = ""
    grouping_separator: str = ""
    time_zone: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "PreferenceInfo":
        data = as_dict(data, "preferenceInfo")
        number_format = get_dict(data, "numberFormat")
        return cls(
            currency_code=get_str(data, "currencyCode"),
            currency_notation_type=dig_str(data, "currencyNotationType", "currencyNotationType"),
            date_format=get_str(data, "dateFormat"),
            decimal_separator=get_str(number_format, "decimalSeparator"),
            group_pattern=get_str(number_format, "groupPattern"),
            grouping_separator=get_str(number_format, "groupingSeparator"),
            time_zone=get_str(data, "timeZone"),
        )


@dataclass
class UserContext:
    """Session context of a newly registered user."""

    cobrand_session_token: str
    user_session_token: str
    preferences: PreferenceInfo
    application_id: str = ""
    channel_id: int = 0
    cobrand_id: int = 0
    is_password_expired: bool = False
    locale: str = ""
    tnc_version: int = 0
    valid: bool = False

    @classmethod
    def from_api_response(cls, data: Any) -> "UserContext":
        data = as_dict(data, "userContext")
        return cls(
            cobrand_session_token=dig_str(data, "cobrandConversationCredentials", "sessionToken"),
            user_session_token=dig_str(data, "conversationCredentials", "sessionToken"),
            preferences=PreferenceInfo.from_api_response(data.get("preferenceInfo")),
            application_id=get_str(data, "applicationId"),
            channel_id=get_int(data, "channelId"),
            cobrand_id=get_int(data, "cobrandId"),
            is_password_expired=get_bool(data, "isPasswordExpired"),
            locale=get_str(data, "locale"),
            tnc_version=get_int(data, "tncVersion"),
            valid=get_bool(data, "valid"),
        )


@dataclass
class RegisterResult:
    """register3 response: the new user's profile echo and session context."""

    user_id: int
    login_name: str
    email_address: str
    user_context: UserContext
    last_login_time: int = 0
    login_count: int = 0
    password_recovered: bool = False

    @classmethod
    def from_api_response(cls, data: Any) -> "RegisterResult":
        data = as_dict(data, "registerResult")
        return cls(
            user_id=get_int(data, "userId"),
            login_name=get_str(data, "loginName"),
            email_address=get_str(data, "emailAddress"),
            user_context=UserContext.from_api_response(data.get("userContext")),
            last_login_time=get_int(data, "lastLoginTime"),
            login_count=get_int(data, "loginCount"),
            password_recovered=get_bool(data, "passwordRecovered"),
        )
