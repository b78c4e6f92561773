from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from todo_api.domain.todos import Todo, TodoCreate, TodoUpdate
from todo_api.services.todo_service import TodoError, TodoService

router = APIRouter(prefix="/api/todos", tags=["todos"])


def _get_todo_service(request: Request) -> TodoService:
    svc = getattr(getattr(request.app, "state", None), "todo_service", None)
    if not svc:
        raise RuntimeError("TodoService not configured")
    return svc


def _error_response(err: TodoError) -> JSONResponse:
    return JSONResponse({"error": err.message}, status_code=err.status_code)


@router.get("", response_model=List[Todo])
def list_todos(request: Request):
    return _get_todo_service(request).list_todos()


@router.post("", response_model=Todo, status_code=201)
def create_todo(request: Request, payload: Optional[TodoCreate] = None):
    svc = _get_todo_service(request)
    try:
        return svc.create_todo(payload)
    except TodoError as exc:
        return _error_response(exc)


@router.put("/{todo_id}", response_model=Todo)
def update_todo(todo_id: str, request: Request, payload: Optional[TodoUpdate] = None):
    svc = _get_todo_service(request)
    try:
        return svc.update_todo(todo_id, payload)
    except TodoError as exc:
        return _error_response(exc)


@router.delete("/{todo_id}", status_code=204, response_class=Response)
def delete_todo(todo_id: str, request: Request):
    svc = _get_todo_service(request)
    try:
        svc.delete_todo(todo_id)
    except TodoError as exc:
        return _error_response(exc)
    return Response(status_code=204)
