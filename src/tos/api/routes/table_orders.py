from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from tos.api.dependencies import get_app_settings, get_order_repository
from tos.application.dto.requests import TableOrdersRequest
from tos.application.dto.responses import ErrorResponse, TableOrdersResponse
from tos.application.ports.repositories import TableOrderRepository
from tos.application.use_cases.add_table_orders import AddTableOrders
from tos.application.use_cases.get_table_order import GetTableOrder
from tos.application.use_cases.list_table_orders import ListTableOrders
from tos.application.use_cases.remove_table_order import RemoveTableOrder
from tos.core.config import Settings
from tos.domain.common.ids import INT16_MAX, INT16_MIN, INT32_MAX, INT32_MIN

router = APIRouter(prefix="/api/v1/tables")

TablePath = Annotated[int, Path(ge=INT16_MIN, le=INT16_MAX)]
OrderPath = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _add_orders_use_case(
    settings: Settings = Depends(get_app_settings),
    repository: TableOrderRepository = Depends(get_order_repository),
) -> AddTableOrders:
    return AddTableOrders(order_repository=repository, max_tables=settings.max_tables)


def _list_orders_use_case(
    settings: Settings = Depends(get_app_settings),
    repository: TableOrderRepository = Depends(get_order_repository),
) -> ListTableOrders:
    return ListTableOrders(order_repository=repository, max_tables=settings.max_tables)


def _get_order_use_case(
    settings: Settings = Depends(get_app_settings),
    repository: TableOrderRepository = Depends(get_order_repository),
) -> GetTableOrder:
    return GetTableOrder(order_repository=repository, max_tables=settings.max_tables)


def _remove_order_use_case(
    settings: Settings = Depends(get_app_settings),
    repository: TableOrderRepository = Depends(get_order_repository),
) -> RemoveTableOrder:
    return RemoveTableOrder(order_repository=repository, max_tables=settings.max_tables)


@router.post(
    "/{table_id}/orders",
    response_model=TableOrdersResponse,
    responses=_ERROR_RESPONSES,
)
def add_table_orders(
    table_id: TablePath,
    request_dto: TableOrdersRequest,
    use_case: AddTableOrders = Depends(_add_orders_use_case),
) -> TableOrdersResponse:
    return use_case.execute(table_id=table_id, request_dto=request_dto)


@router.get(
    "/{table_id}/orders",
    response_model=TableOrdersResponse,
    responses=_ERROR_RESPONSES,
)
def list_table_orders(
    table_id: TablePath,
    use_case: ListTableOrders = Depends(_list_orders_use_case),
) -> TableOrdersResponse:
    return use_case.execute(table_id=table_id)


@router.get(
    "/{table_id}/orders/{order_id}",
    response_model=TableOrdersResponse,
    responses=_ERROR_RESPONSES,
)
def get_table_order(
    table_id: TablePath,
    order_id: OrderPath,
    use_case: GetTableOrder = Depends(_get_order_use_case),
) -> TableOrdersResponse:
    return use_case.execute(table_id=table_id, order_id=order_id)


@router.delete(
    "/{table_id}/orders/{order_id}",
    response_model=TableOrdersResponse,
    responses=_ERROR_RESPONSES,
)
def remove_table_order(
    table_id: TablePath,
    order_id: OrderPath,
    use_case: RemoveTableOrder = Depends(_remove_order_use_case),
) -> TableOrdersResponse:
    return use_case.execute(table_id=table_id, order_id=order_id)
