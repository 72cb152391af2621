from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import APIRequestContext

from automation_exercise.api.clients.automation_exercise_api_client import AutomationExerciseApiClient
from automation_exercise.api.models.automation_exercise import RESPONSE_CODES, User
from automation_exercise.common.errors import ApiResponseError

API = "https://api.example.test"

PRODUCT = {
    "id": 1,
    "name": "Blue Top",
    "price": "Rs. 500",
    "brand": "Polo",
    "category": {"usertype": {"usertype": "Women"}, "category": "Tops"},
}


def json_response(payload, url=API):
    response = MagicMock()
    response.json = AsyncMock(return_value=payload)
    response.url = url
    return response


@pytest.fixture
def request_context():
    return MagicMock(spec=APIRequestContext)


@pytest.fixture
def client(request_context):
    return AutomationExerciseApiClient(request_context, base_url=API + "/")


def replies(request_context, method, payload):
    getattr(request_context, method).return_value = json_response(payload)
    return getattr(request_context, method)


@pytest.mark.asyncio
async def test_get_all_products(client, request_context):
    get = replies(request_context, "get", {"responseCode": 200, "products": [PRODUCT]})

    result = await client.get_all_products()

    get.assert_awaited_once_with(f"{API}/api/productsList")
    assert result.response_code == RESPONSE_CODES["SUCCESS"]
    assert result.products[0].name == "Blue Top"
    assert result.products[0].category.usertype.usertype == "Women"


@pytest.mark.asyncio
async def test_methods_not_allowed(client, request_context):
    message = {"responseCode": 405, "message": "This request method is not supported."}
    post = replies(request_context, "post", message)
    put = replies(request_context, "put", message)
    delete = replies(request_context, "delete", message)

    assert (await client.post_to_all_products()).response_code == 405
    assert (await client.put_to_all_brands()).message == message["message"]
    assert (await client.delete_verify_login()).response_code == 405

    post.assert_awaited_once_with(f"{API}/api/productsList")
    put.assert_awaited_once_with(f"{API}/api/brandsList")
    delete.assert_awaited_once_with(f"{API}/api/verifyLogin")


@pytest.mark.asyncio
async def test_get_all_brands(client, request_context):
    replies(request_context, "get", {"responseCode": 200, "brands": [{"id": 1, "brand": "Polo"}]})

    result = await client.get_all_brands()

    assert [brand.brand for brand in result.brands] == ["Polo"]


@pytest.mark.asyncio
async def test_search_product_sends_form(client, request_context):
    post = replies(request_context, "post", {"responseCode": 200, "products": [PRODUCT]})

    result = await client.search_product("top")

    post.assert_awaited_once_with(f"{API}/api/searchProduct", form={"search_product": "top"})
    assert len(result.products) == 1


@pytest.mark.asyncio
async def test_search_product_without_parameter(client, request_context):
    post = replies(
        request_context,
        "post",
        {"responseCode": 400, "message": "Bad request, search_product parameter is missing in POST request."},
    )

    result = await client.search_product_without_parameter()

    post.assert_awaited_once_with(f"{API}/api/searchProduct", form={})
    assert result.response_code == RESPONSE_CODES["BAD_REQUEST"]


@pytest.mark.asyncio
async def test_verify_login_variants(client, request_context):
    post = replies(request_context, "post", {"responseCode": 200, "message": "User exists!"})

    assert (await client.verify_login("a@example.com", "pw")).message == "User exists!"
    post.assert_awaited_with(f"{API}/api/verifyLogin", form={"email": "a@example.com", "password": "pw"})

    await client.verify_login_without_email("pw")
    post.assert_awaited_with(f"{API}/api/verifyLogin", form={"password": "pw"})

    await client.verify_login_with_invalid_details("nobody@example.com", "bad")
    post.assert_awaited_with(f"{API}/api/verifyLogin", form={"email": "nobody@example.com", "password": "bad"})


@pytest.mark.asyncio
async def test_create_and_update_send_only_set_fields(client, request_context):
    post = replies(request_context, "post", {"responseCode": 201, "message": "User created!"})
    put = replies(request_context, "put", {"responseCode": 200, "message": "User updated!"})
    user = User(name="Ada", email="ada@example.com", password="pw", birth_year="1990")

    created = await client.create_user_account(user)
    await client.update_user_account(user)

    expected_form = {"name": "Ada", "email": "ada@example.com", "password": "pw", "birth_year": "1990"}
    post.assert_awaited_once_with(f"{API}/api/createAccount", form=expected_form)
    put.assert_awaited_once_with(f"{API}/api/updateAccount", form=expected_form)
    assert created.response_code == RESPONSE_CODES["CREATED"]


@pytest.mark.asyncio
async def test_delete_user_account(client, request_context):
    delete = replies(request_context, "delete", {"responseCode": 200, "message": "Account deleted!"})

    await client.delete_user_account("ada@example.com", "pw")

    delete.assert_awaited_once_with(
        f"{API}/api/deleteAccount", form={"email": "ada@example.com", "password": "pw"}
    )


@pytest.mark.asyncio
async def test_get_user_detail_by_email(client, request_context):
    get = replies(
        request_context,
        "get",
        {"responseCode": 200, "user": {"id": 7, "name": "Ada", "email": "ada@example.com", "city": "London"}},
    )

    result = await client.get_user_detail_by_email("ada@example.com")

    get.assert_awaited_once_with(f"{API}/api/getUserDetailByEmail", params={"email": "ada@example.com"})
    assert result.user.id == 7
    assert result.user.city == "London"


@pytest.mark.asyncio
async def test_unknown_user_detail_keeps_message(client, request_context):
    replies(
        request_context,
        "get",
        {"responseCode": 404, "message": "Account not found with this email, try another email!"},
    )

    result = await client.get_user_detail_by_email("ghost@example.com")

    assert result.user is None
    assert result.response_code == RESPONSE_CODES["NOT_FOUND"]


@pytest.mark.asyncio
async def test_unexpected_body_raises_api_response_error(client, request_context):
    payload = {"status": "maintenance"}
    replies(request_context, "get", payload)

    with pytest.raises(ApiResponseError) as excinfo:
        await client.get_all_products()

    assert excinfo.value.payload == payload


def test_base_url_defaults_to_config(request_context, monkeypatch):
    from automation_exercise.common.config import Config

    monkeypatch.setattr(Config, "API_BASE_URL", "https://configured.example.test")

    assert AutomationExerciseApiClient(request_context).base_url == "https://configured.example.test"
