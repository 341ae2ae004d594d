"""Signup and login endpoints."""
from fastapi import APIRouter, Depends

from storefront.interfaces.http.deps import get_account_service
from storefront.modules.accounts import AccountService
from storefront.schemas import AccountResponse, LoginRequest, SignupRequest, UserResponse

router = APIRouter()


@router.post("/signup", response_model=AccountResponse, summary="Create a storefront account")
async def signup(
    payload: SignupRequest,
    account_service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    account = await account_service.signup(payload.to_input())
    return AccountResponse(user=UserResponse.from_domain(account))


@router.post("/login", response_model=AccountResponse, summary="Verify username and password")
async def login(
    payload: LoginRequest,
    account_service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    account = await account_service.login(payload.username, payload.password)
    return AccountResponse(user=UserResponse.from_domain(account))
