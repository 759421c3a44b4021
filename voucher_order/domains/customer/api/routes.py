"""
Customer API Routes

FastAPI router for customer endpoints, including the vouchers a customer holds.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from voucher_order.domains.customer.api.dependencies import (
    get_create_customer_use_case,
    get_delete_customer_use_case,
    get_find_blacklist_customers_use_case,
    get_get_customer_use_case,
    get_list_customers_use_case,
    get_record_customer_login_use_case,
    get_update_customer_use_case,
)
from voucher_order.domains.customer.api.schemas import (
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)
from voucher_order.domains.customer.application.use_cases import (
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    FindBlacklistCustomersUseCase,
    GetCustomerUseCase,
    ListCustomersUseCase,
    RecordCustomerLoginUseCase,
    UpdateCustomerUseCase,
)
from voucher_order.domains.voucher.api.dependencies import (
    get_list_vouchers_use_case,
    get_revoke_customer_vouchers_use_case,
)
from voucher_order.domains.voucher.api.schemas import DeletedResponse, VoucherResponse
from voucher_order.domains.voucher.application.use_cases import (
    ListVouchersRequest,
    ListVouchersUseCase,
    RevokeCustomerVouchersUseCase,
)

router = APIRouter(prefix="/customers", tags=["Customers"])

CreateCustomerUseCaseDep = Annotated[CreateCustomerUseCase, Depends(get_create_customer_use_case)]
GetCustomerUseCaseDep = Annotated[GetCustomerUseCase, Depends(get_get_customer_use_case)]
ListCustomersUseCaseDep = Annotated[ListCustomersUseCase, Depends(get_list_customers_use_case)]
UpdateCustomerUseCaseDep = Annotated[UpdateCustomerUseCase, Depends(get_update_customer_use_case)]
DeleteCustomerUseCaseDep = Annotated[DeleteCustomerUseCase, Depends(get_delete_customer_use_case)]
BlacklistUseCaseDep = Annotated[FindBlacklistCustomersUseCase, Depends(get_find_blacklist_customers_use_case)]
RecordLoginUseCaseDep = Annotated[RecordCustomerLoginUseCase, Depends(get_record_customer_login_use_case)]
ListVouchersUseCaseDep = Annotated[ListVouchersUseCase, Depends(get_list_vouchers_use_case)]
RevokeVouchersUseCaseDep = Annotated[RevokeCustomerVouchersUseCase, Depends(get_revoke_customer_vouchers_use_case)]


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(request: CustomerCreateRequest, use_case: CreateCustomerUseCaseDep):
    """Register a customer."""
    return CustomerResponse.model_validate(await use_case.execute(request))


@router.get("", response_model=list[CustomerResponse])
async def list_customers(use_case: ListCustomersUseCaseDep, name: str | None = None):
    """List customers, optionally by exact name."""
    return [CustomerResponse.model_validate(customer) for customer in await use_case.execute(name)]


@router.get("/blacklist", response_model=list[CustomerResponse])
async def get_blacklist(use_case: BlacklistUseCaseDep):
    """List blacklisted customers."""
    return [CustomerResponse.model_validate(customer) for customer in await use_case.execute()]


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: UUID, use_case: GetCustomerUseCaseDep):
    """Get customer by ID."""
    return CustomerResponse.model_validate(await use_case.execute(customer_id))


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(customer_id: UUID, request: CustomerUpdateRequest, use_case: UpdateCustomerUseCaseDep):
    """Update name, email and type of a customer."""
    return CustomerResponse.model_validate(await use_case.execute(customer_id, request))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: UUID, use_case: DeleteCustomerUseCaseDep):
    """Delete a customer. Their vouchers become unassigned."""
    await use_case.execute(customer_id)


@router.post("/{customer_id}/login", status_code=status.HTTP_204_NO_CONTENT)
async def record_login(customer_id: UUID, use_case: RecordLoginUseCaseDep):
    """Stamp the last login time of a customer."""
    await use_case.execute(customer_id)


@router.get("/{customer_id}/vouchers", response_model=list[VoucherResponse])
async def get_customer_vouchers(customer_id: UUID, use_case: ListVouchersUseCaseDep):
    """Vouchers held by a customer."""
    vouchers = await use_case.execute(ListVouchersRequest(customer_id=customer_id))
    return [VoucherResponse.model_validate(voucher) for voucher in vouchers]


@router.delete("/{customer_id}/vouchers", response_model=DeletedResponse)
async def revoke_customer_vouchers(customer_id: UUID, use_case: RevokeVouchersUseCaseDep):
    """Delete every voucher held by a customer."""
    return DeletedResponse(deleted=await use_case.execute(customer_id))


__all__ = ["router"]
