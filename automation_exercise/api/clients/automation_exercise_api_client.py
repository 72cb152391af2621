import logging
from typing import Any, Dict, Optional, Type, TypeVar

from playwright.async_api import APIRequestContext
from pydantic import ValidationError

from automation_exercise.api.models.automation_exercise import (
    API_ENDPOINTS,
    BrandsResponse,
    CreateUserResponse,
    ErrorResponse,
    LoginResponse,
    ProductsResponse,
    SearchProductResponse,
    User,
    UserDetailsResponse,
)
from automation_exercise.common.errors import ApiResponseError
from automation_exercise.common.utils.environment import init_url
from automation_exercise.common.utils.url_builder import build_url

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class AutomationExerciseApiClient:
    """
    API client for the Automation Exercise website.

    Wraps a Playwright APIRequestContext and parses every JSON body into the
    matching pydantic model. Each method maps to one entry of the site's
    published API list.
    """

    def __init__(self, request: APIRequestContext, base_url: Optional[str] = None):
        self.request = request
        self.base_url = (base_url or init_url().api).rstrip("/")

    def _url(self, endpoint: str) -> str:
        return build_url(f"{self.base_url}{API_ENDPOINTS[endpoint]}")

    async def _parse(self, response, model: Type[ModelT]) -> ModelT:
        payload = await response.json()
        try:
            parsed = model.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Unexpected {model.__name__} payload from {response.url}: {e}")
            raise ApiResponseError(f"Response did not match {model.__name__}", payload=payload) from e
        logger.debug(f"{response.url} -> responseCode={parsed.response_code}")
        return parsed

    async def _send(
        self,
        method: str,
        endpoint: str,
        model: Type[ModelT],
        form: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        ) -> ModelT:
        url = self._url(endpoint)
        logger.info(f"{method.upper()} {url}")
        kwargs: Dict[str, Any] = {}
        if form is not None:
            kwargs["form"] = form
        if params is not None:
            kwargs["params"] = params
        response = await getattr(self.request, method)(url, **kwargs)
        return await self._parse(response, model)

    # ---------- PRODUCTS & BRANDS ----------

    async def get_all_products(self) -> ProductsResponse:
        """API 1: GET all products list."""
        return await self._send("get", "PRODUCTS_LIST", ProductsResponse)

    async def post_to_all_products(self) -> ErrorResponse:
        """API 2: POST to all products list (answers 405)."""
        return await self._send("post", "PRODUCTS_LIST", ErrorResponse)

    async def get_all_brands(self) -> BrandsResponse:
        """API 3: GET all brands list."""
        return await self._send("get", "BRANDS_LIST", BrandsResponse)

    async def put_to_all_brands(self) -> ErrorResponse:
        """API 4: PUT to all brands list (answers 405)."""
        return await self._send("put", "BRANDS_LIST", ErrorResponse)

    async def search_product(self, search_term: str) -> SearchProductResponse:
        """
        API 5: POST to search product.

        Args:
            search_term: Product name to search for
        """
        return await self._send(
            "post", "SEARCH_PRODUCT", SearchProductResponse, form={"search_product": search_term}
        )

    async def search_product_without_parameter(self) -> ErrorResponse:
        """API 6: POST to search product without the search_product parameter."""
        return await self._send("post", "SEARCH_PRODUCT", ErrorResponse, form={})

    # ---------- AUTHENTICATION ----------

    async def verify_login(self, email: str, password: str) -> LoginResponse:
        """API 7: POST to verify login with valid details."""
        return await self._send(
            "post", "VERIFY_LOGIN", LoginResponse, form={"email": email, "password": password}
        )

    async def verify_login_without_email(self, password: str) -> ErrorResponse:
        """API 8: POST to verify login without the email parameter."""
        return await self._send("post", "VERIFY_LOGIN", ErrorResponse, form={"password": password})

    async def delete_verify_login(self) -> ErrorResponse:
        """API 9: DELETE to verify login (answers 405)."""
        return await self._send("delete", "VERIFY_LOGIN", ErrorResponse)

    async def verify_login_with_invalid_details(self, email: str, password: str) -> ErrorResponse:
        """API 10: POST to verify login with invalid details."""
        return await self._send(
            "post", "VERIFY_LOGIN", ErrorResponse, form={"email": email, "password": password}
        )

    # ---------- ACCOUNTS ----------

    async def create_user_account(self, user: User) -> CreateUserResponse:
        """API 11: POST to create/register a user account."""
        logger.info(f"Creating account for {user.email}")
        return await self._send("post", "CREATE_ACCOUNT", CreateUserResponse, form=user.to_form())

    async def delete_user_account(self, email: str, password: str) -> CreateUserResponse:
        """API 12: DELETE a user account."""
        logger.info(f"Deleting account for {email}")
        return await self._send(
            "delete", "DELETE_ACCOUNT", CreateUserResponse, form={"email": email, "password": password}
        )

    async def update_user_account(self, user: User) -> CreateUserResponse:
        """API 13: PUT to update a user account."""
        return await self._send("put", "UPDATE_ACCOUNT", CreateUserResponse, form=user.to_form())

    async def get_user_detail_by_email(self, email: str) -> UserDetailsResponse:
        """API 14: GET user account detail by email."""
        return await self._send("get", "GET_USER_BY_EMAIL", UserDetailsResponse, params={"email": email})
