"""
Automation Exercise API models.

Shapes follow the responses documented at https://automationexercise.com/api_list.
The site always answers HTTP 200 and reports the real outcome in the
``responseCode`` body field, exposed here as ``response_code``.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

API_ENDPOINTS: Dict[str, str] = {
    "PRODUCTS_LIST": "/api/productsList",
    "BRANDS_LIST": "/api/brandsList",
    "SEARCH_PRODUCT": "/api/searchProduct",
    "VERIFY_LOGIN": "/api/verifyLogin",
    "CREATE_ACCOUNT": "/api/createAccount",
    "DELETE_ACCOUNT": "/api/deleteAccount",
    "UPDATE_ACCOUNT": "/api/updateAccount",
    "GET_USER_BY_EMAIL": "/api/getUserDetailByEmail",
}

RESPONSE_CODES: Dict[str, int] = {
    "SUCCESS": 200,
    "CREATED": 201,
    "BAD_REQUEST": 400,
    "NOT_FOUND": 404,
    "METHOD_NOT_ALLOWED": 405,
}


class ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ApiResponse(ApiModel):
    response_code: int = Field(alias="responseCode")


class UserType(ApiModel):
    usertype: str  # "Women", "Men", "Kids"


class ProductCategory(ApiModel):
    usertype: UserType
    category: str  # "Tops", "Tshirts", "Dress", ...


class Product(ApiModel):
    id: int
    name: str
    price: str  # "Rs. 500"
    brand: str
    category: ProductCategory


class Brand(ApiModel):
    id: int
    brand: str


class User(ApiModel):
    """Account fields, as sent in form data and returned by the detail endpoint."""
    id: Optional[int] = None
    name: str
    email: str
    password: Optional[str] = None
    title: Optional[str] = None  # "Mr", "Mrs"
    birth_date: Optional[str] = None
    birth_month: Optional[str] = None
    birth_year: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    company: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    country: Optional[str] = None
    zipcode: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    mobile_number: Optional[str] = None

    def to_form(self) -> Dict[str, str]:
        """Form payload for create/update: set fields only, stringified."""
        data = self.model_dump(exclude_none=True, exclude={"id"})
        return {key: str(value) for key, value in data.items()}


class ProductsResponse(ApiResponse):
    products: List[Product] = Field(default_factory=list)


class SearchProductResponse(ApiResponse):
    products: List[Product] = Field(default_factory=list)


class BrandsResponse(ApiResponse):
    brands: List[Brand] = Field(default_factory=list)


class MessageResponse(ApiResponse):
    message: str


class LoginResponse(MessageResponse):
    pass


class CreateUserResponse(MessageResponse):
    pass


class ErrorResponse(MessageResponse):
    pass


class UserDetailsResponse(ApiResponse):
    user: Optional[User] = None
    message: Optional[str] = None
