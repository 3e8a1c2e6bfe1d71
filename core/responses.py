from rest_framework import status as http_status
from rest_framework.response import Response


def envelope(message, data=None, status=http_status.HTTP_200_OK):
    """Resposta de sucesso no formato {"success", "message", "data"}"""
    return Response({"success": True, "message": message, "data": data}, status=status)
