"""
Tratamento centralizado de erros da API.

Toda resposta de erro sai no mesmo envelope usado pelas respostas de sucesso:
{"success": false, "message": "...", "errors": {...}}
"""

import logging

from django.core.exceptions import PermissionDenied
from django.db.models import ProtectedError, RestrictedError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

MENSAGEM_VALIDACAO = "Erro de validação."
MENSAGEM_NAO_AUTORIZADO = "Não autorizado."
MENSAGEM_ERRO_INTERNO = "Erro interno do servidor."


class UnprocessableEntity(exceptions.APIException):
    """Regra de negócio violada (HTTP 422) sem erro de campo associado"""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "Não foi possível processar a requisição."
    default_code = "unprocessable_entity"


class DependenciasExistentes(UnprocessableEntity):
    """Remoção bloqueada por registros dependentes"""

    default_detail = "Não é possível remover o registro devido a dependências."
    default_code = "dependencias_existentes"


def _mensagem(data):
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    if isinstance(data, list) and data:
        return str(data[0])
    return str(data)


def envelope_exception_handler(exc, context):
    """
    Exception handler do DRF que padroniza o corpo das respostas de erro.

    - ValidationError vira 422 com o mapa campo -> mensagens
    - 401/403/404 trazem apenas a mensagem
    - Exceções inesperadas viram 500 com mensagem genérica (detalhes só no log)
    """
    if isinstance(exc, (ProtectedError, RestrictedError)):
        exc = DependenciasExistentes()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        request = context.get("request")
        user = getattr(request, "user", None)
        loja_id = getattr(user, "loja_id", None)
        logger.exception(
            f"Erro inesperado em {view.__class__.__name__ if view else 'view desconhecida'} "
            f"(loja_id={loja_id}): {exc}"
        )
        return Response(
            {"success": False, "message": MENSAGEM_ERRO_INTERNO},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        errors = response.data
        if not isinstance(errors, dict):
            errors = {"non_field_errors": errors}
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        response.data = {
            "success": False,
            "message": MENSAGEM_VALIDACAO,
            "errors": errors,
        }
        return response

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response.data = {"success": False, "message": MENSAGEM_NAO_AUTORIZADO}
        return response

    if isinstance(exc, Http404):
        response.data = {"success": False, "message": "Recurso não encontrado."}
        return response

    if isinstance(exc, PermissionDenied):
        response.data = {"success": False, "message": "Acesso negado."}
        return response

    response.data = {"success": False, "message": _mensagem(response.data)}
    return response
