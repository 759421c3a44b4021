"""
Voucher API Routes

FastAPI router for voucher endpoints.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from voucher_order.domains.customer.api.schemas import CustomerResponse
from voucher_order.domains.customer.application.use_cases import GetVoucherOwnerUseCase
from voucher_order.domains.voucher.api.dependencies import (
    get_assign_voucher_use_case,
    get_create_voucher_use_case,
    get_delete_voucher_use_case,
    get_get_voucher_use_case,
    get_list_vouchers_use_case,
    get_update_voucher_use_case,
    get_voucher_owner_use_case,
)
from voucher_order.domains.voucher.api.schemas import (
    VoucherAssignRequest,
    VoucherCreateRequest,
    VoucherResponse,
    VoucherUpdateRequest,
)
from voucher_order.domains.voucher.application.use_cases import (
    AssignVoucherRequest,
    AssignVoucherUseCase,
    CreateVoucherRequest,
    CreateVoucherUseCase,
    DeleteVoucherUseCase,
    GetVoucherUseCase,
    ListVouchersRequest,
    ListVouchersUseCase,
    UpdateVoucherRequest,
    UpdateVoucherUseCase,
)
from voucher_order.domains.voucher.domain.value_objects.voucher_type import VoucherType

router = APIRouter(prefix="/vouchers", tags=["Vouchers"])

# Type aliases for use case dependencies
CreateVoucherUseCaseDep = Annotated[CreateVoucherUseCase, Depends(get_create_voucher_use_case)]
GetVoucherUseCaseDep = Annotated[GetVoucherUseCase, Depends(get_get_voucher_use_case)]
ListVouchersUseCaseDep = Annotated[ListVouchersUseCase, Depends(get_list_vouchers_use_case)]
UpdateVoucherUseCaseDep = Annotated[UpdateVoucherUseCase, Depends(get_update_voucher_use_case)]
AssignVoucherUseCaseDep = Annotated[AssignVoucherUseCase, Depends(get_assign_voucher_use_case)]
DeleteVoucherUseCaseDep = Annotated[DeleteVoucherUseCase, Depends(get_delete_voucher_use_case)]
VoucherOwnerUseCaseDep = Annotated[GetVoucherOwnerUseCase, Depends(get_voucher_owner_use_case)]


@router.post("", response_model=VoucherResponse, status_code=status.HTTP_201_CREATED)
async def create_voucher(request: VoucherCreateRequest, use_case: CreateVoucherUseCaseDep):
    """Create a voucher."""
    voucher = await use_case.execute(
        CreateVoucherRequest(
            voucher_type=request.voucher_type,
            discount_value=request.discount_value,
            customer_id=request.customer_id,
        )
    )
    return VoucherResponse.model_validate(voucher)


@router.get("", response_model=list[VoucherResponse])
async def list_vouchers(
    use_case: ListVouchersUseCaseDep,
    customer_id: UUID | None = None,
    voucher_type: Annotated[VoucherType | None, Query(alias="type")] = None,
    created_on: Annotated[date | None, Query(alias="date")] = None,
):
    """List vouchers, optionally by owner or by type and creation day."""
    vouchers = await use_case.execute(
        ListVouchersRequest(customer_id=customer_id, voucher_type=voucher_type, created_on=created_on)
    )
    return [VoucherResponse.model_validate(voucher) for voucher in vouchers]


@router.get("/{voucher_id}", response_model=VoucherResponse)
async def get_voucher(voucher_id: UUID, use_case: GetVoucherUseCaseDep):
    """Get voucher by ID."""
    return VoucherResponse.model_validate(await use_case.execute(voucher_id))


@router.put("/{voucher_id}", response_model=VoucherResponse)
async def update_voucher(voucher_id: UUID, request: VoucherUpdateRequest, use_case: UpdateVoucherUseCaseDep):
    """Replace the type and discount value of a voucher."""
    voucher = await use_case.execute(
        UpdateVoucherRequest(
            voucher_id=voucher_id,
            voucher_type=request.voucher_type,
            discount_value=request.discount_value,
        )
    )
    return VoucherResponse.model_validate(voucher)


@router.patch("/{voucher_id}/customer", response_model=VoucherResponse)
async def assign_voucher(voucher_id: UUID, request: VoucherAssignRequest, use_case: AssignVoucherUseCaseDep):
    """Assign a voucher to a customer, or release it."""
    voucher = await use_case.execute(AssignVoucherRequest(voucher_id=voucher_id, customer_id=request.customer_id))
    return VoucherResponse.model_validate(voucher)


@router.get("/{voucher_id}/owner", response_model=CustomerResponse)
async def get_voucher_owner(voucher_id: UUID, use_case: VoucherOwnerUseCaseDep):
    """Get the customer holding a voucher."""
    return CustomerResponse.model_validate(await use_case.execute(voucher_id))


@router.delete("/{voucher_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_voucher(voucher_id: UUID, use_case: DeleteVoucherUseCaseDep):
    """Delete a voucher."""
    await use_case.execute(voucher_id)


__all__ = ["router"]
