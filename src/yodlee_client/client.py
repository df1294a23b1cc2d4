"""
Yodlee REST API client implementation.
"""

import logging
import threading
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .decoding import dig_str
from .envelopes import parse_body, raise_for_envelope
from .errors import (
    NoSessionTokenError,
    YodleeConnectionError,
    YodleeDecodeError,
    YodleeError,
    YodleeHTTPError,
)
from .models import (
    PASSWORD_CREDENTIALS_TYPE,
    Credentials,
    RegisterResult,
    SiteAccount,
    TransactionSearchParams,
    TransactionSearchResult,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://rest.developer.yodlee.com/services/srest/restserver/v1.0"

COBRAND_LOGIN_PATH = "/authenticate/coblogin"
USER_LOGIN_PATH = "/authenticate/login"
SITE_ACCOUNTS_PATH = "/jsonsdk/SiteAccountManagement/getAllSiteAccounts"
TRANSACTION_SEARCH_PATH = "/jsonsdk/TransactionSearchService/executeUserSearchRequest"
REGISTER_PATH = "/jsonsdk/UserRegistration/register3"

_SECRET_MARKERS = ("password", "token")


def _masked(form: dict[str, Any]) -> dict[str, Any]:
    """Copy of form data with passwords and tokens hidden, for logging."""
    return {
        key: "***" if any(marker in key.lower() for marker in _SECRET_MARKERS) else value
        for key, value in form.items()
    }


class YodleeClient:
    """
    Client for the Yodlee REST API.

    Features:
    - Cobrand and user authentication
    - Site accounts and transaction search
    - User registration
    - Error envelope detection on every response

    The cobrand session token is the only mutable state; it is set by
    authenticate() and read by every session-scoped call under a lock.
    """

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        login: str,
        password: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
        max_retries: int = 0,
        backoff_factor: float = 0.5,
    ):
        """
        Initialize Yodlee client.

        Args:
            login: Cobrand login
            password: Cobrand password
            base_url: REST server root (override for sandboxes and tests)
            timeout: Request timeout in seconds
            max_retries: Transport-level retry attempts (0 = never retry)
            backoff_factor: Backoff factor for retries
        """
        self.credentials = Credentials(login, password)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._session_token = ""
        self._token_lock = threading.Lock()

        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["POST"],
            # Exhausted retries hand back the last response so _post can map it
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    @property
    def session_token(self) -> str:
        """Current cobrand session token ("" before authenticate())."""
        with self._token_lock:
            return self._session_token

    @property
    def is_authenticated(self) -> bool:
        return bool(self.session_token)

    def _require_session(self) -> str:
        """Snapshot the session token, failing fast when there is none."""
        token = self.session_token
        if not token:
            raise NoSessionTokenError()
        return token

    def _post(self, endpoint: str, form: dict[str, Any]) -> Any:
        """
        POST form data and return the parsed, error-checked JSON body.

        Raises:
            YodleeConnectionError: Connection failure or timeout
            YodleeError: Any other transport failure
            YodleeAPIError: Body is a Yodlee error envelope
            YodleeHTTPError: Non-2xx status without an error envelope
            YodleeDecodeError: Body is not valid JSON
        """
        url = f"{self.base_url}{endpoint}"

        logger.debug(f"API Request: POST {url}")
        logger.debug(f"Request form: {_masked(form)}")

        try:
            response = self.session.post(url, data=form, timeout=self.timeout)
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error to {url}: {e}")
            raise YodleeConnectionError(
                f"Failed to connect to Yodlee at {self.base_url}: {e}"
            ) from e
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout for {url}: {e}")
            raise YodleeConnectionError(f"Request to Yodlee timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for {url}: {e}")
            raise YodleeError(f"Request failed: {e}") from e

        body = response.text
        logger.debug(f"Response status: {response.status_code}")
        logger.debug(f"Response body: {body}")

        if not response.ok:
            http_failure = f"HTTP {response.status_code}: {response.reason}"
            try:
                raise_for_envelope(
                    body,
                    status_code=response.status_code,
                    prior_errors=[http_failure],
                )
            except YodleeDecodeError:
                logger.debug("Error response body is not JSON")
            logger.error(f"API Error {http_failure}")
            raise YodleeHTTPError(
                status_code=response.status_code,
                message=response.reason,
                response_body=body,
            )

        data = parse_body(body)
        raise_for_envelope(data, status_code=response.status_code)
        return data

    def authenticate(self) -> str:
        """
        Authenticate the cobrand and keep the session token.

        Returns:
            The new cobrand session token

        Raises:
            YodleeError: On any failure; the stored token is left unchanged
        """
        token = self.get_cob_session_token()
        with self._token_lock:
            self._session_token = token
        logger.info("Cobrand authenticated")
        return token

    def get_cob_session_token(self) -> str:
        """Log in the cobrand and return its session token."""
        data = self._post(
            COBRAND_LOGIN_PATH,
            {
                "cobrandLogin": self.credentials.login,
                "cobrandPassword": self.credentials.password,
            },
        )
        token = dig_str(data, "cobrandConversationCredentials", "sessionToken")
        if not token:
            raise YodleeDecodeError("Cobrand login response carried no session token")
        return token

    def get_user_session_token(self, login: str, password: str) -> str:
        """
        Log in an end user under the current cobrand session.

        Args:
            login: End-user login name
            password: End-user password

        Returns:
            The user session token, to pass to get_accounts()/get_transactions()
        """
        cob_token = self._require_session()
        data = self._post(
            USER_LOGIN_PATH,
            {
                "login": login,
                "password": password,
                "cobSessionToken": cob_token,
            },
        )
        token = dig_str(data, "userContext", "conversationCredentials", "sessionToken")
        if not token:
            raise YodleeDecodeError("User login response carried no session token")
        return token

    def get_accounts(self, user_token: str) -> list[SiteAccount]:
        """Get all site accounts of the user behind user_token."""
        cob_token = self._require_session()
        data = self._post(
            SITE_ACCOUNTS_PATH,
            {
                "cobSessionToken": cob_token,
                "userSessionToken": user_token,
            },
        )
        accounts = SiteAccount.list_from_api_response(data)
        logger.info(f"Fetched {len(accounts)} site account(s)")
        return accounts

    def get_transactions(
        self,
        user_token: str,
        params: TransactionSearchParams | None = None,
    ) -> TransactionSearchResult:
        """
        Search the user's transactions.

        Args:
            user_token: User session token
            params: Search parameters; defaults to TransactionSearchParams()

        Returns:
            TransactionSearchResult with totals and the matching transactions
        """
        cob_token = self._require_session()
        if params is None:
            params = TransactionSearchParams()

        form = params.to_form()
        form["cobSessionToken"] = cob_token
        form["userSessionToken"] = user_token

        data = self._post(TRANSACTION_SEARCH_PATH, form)
        result = TransactionSearchResult.from_api_response(data)
        logger.info(
            f"Transaction search returned {len(result.transactions)} of "
            f"{result.number_of_hits} hit(s)"
        )
        return result

    def register(self, email: str, password: str) -> RegisterResult:
        """
        Register a new end user; the email doubles as login name.

        Returns:
            RegisterResult with the new user's tokens and preferences
        """
        cob_token = self._require_session()
        data = self._post(
            REGISTER_PATH,
            {
                "cobSessionToken": cob_token,
                "userCredentials.loginName": email,
                "userCredentials.password": password,
                "userCredentials.objectInstanceType": PASSWORD_CREDENTIALS_TYPE,
                "userProfile.emailAddress": email,
            },
        )
        result = RegisterResult.from_api_response(data)
        logger.info(f"Registered user {result.login_name} (id={result.user_id})")
        return result
