"""
Serviço de consulta do clima na API da OpenWeatherMap
"""

import logging
from typing import Any, Dict

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

OPENWEATHER_API_URL_PADRAO = "https://api.openweathermap.org/data/2.5/weather"


class OpenWeatherService:
    """
    Consulta o clima atual de uma cidade.

    Os métodos retornam sempre {"data": ..., "error": ...}; em caso de falha
    `error` traz {"message", "statusCode"}.
    """

    @staticmethod
    def _erro(message: str, status_code: int, tipo: str = None) -> Dict[str, Any]:
        error = {"message": message, "statusCode": status_code}
        if tipo:
            error["type"] = tipo
        return {"data": None, "error": error}

    @staticmethod
    def _extrair_dados(payload: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "cidade": payload["name"],
            "temperatura": payload["main"]["temp"],
            "umidade": payload["main"]["humidity"],
            "descricao": payload["weather"][0]["description"],
        }

    @staticmethod
    def obter_clima(cidade: str) -> Dict[str, Any]:
        """
        Busca o clima atual da cidade

        Args:
            cidade: Nome da cidade (ex: "Luanda")

        Returns:
            Dict {data: {cidade, temperatura, umidade, descricao}, error: None}
        """
        api_key = getattr(settings, "OPENWEATHER_API_KEY", "")
        api_url = getattr(settings, "OPENWEATHER_API_URL", OPENWEATHER_API_URL_PADRAO)
        timeout = getattr(settings, "OPENWEATHER_API_TIMEOUT", 10)

        if not api_key:
            logger.error("OPENWEATHER_API_KEY não está configurada")
            return OpenWeatherService._erro("Chave da API não configurada.", 500, "configuracao")

        params = {"q": cidade, "appid": api_key, "units": "metric", "lang": "pt_br"}

        try:
            response = requests.get(api_url, params=params, timeout=timeout)
            response.raise_for_status()
            return {"data": OpenWeatherService._extrair_dados(response.json()), "error": None}

        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout ao consultar a OpenWeatherMap para '{cidade}': {e}")
            return OpenWeatherService._erro(
                "O serviço de clima não respondeu a tempo. Tente novamente em alguns instantes.",
                504,
                "timeout",
            )
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Erro de conexão com a OpenWeatherMap: {e}")
            return OpenWeatherService._erro(
                "Não foi possível conectar ao serviço de clima. Tente novamente em alguns instantes.",
                503,
                "connection_error",
            )
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code
            try:
                corpo = e.response.json()
            except ValueError:
                corpo = None
            mensagem = (
                corpo.get("message") if isinstance(corpo, dict) else None
            ) or "Falha ao obter dados climáticos"
            logger.warning(f"OpenWeatherMap respondeu {status_code} para '{cidade}': {mensagem}")
            return OpenWeatherService._erro(f"Erro da API: {mensagem}", status_code, "api_error")
        except requests.exceptions.RequestException as e:
            logger.error(f"Erro ao consultar a OpenWeatherMap: {e}")
            return OpenWeatherService._erro("Falha ao obter dados climáticos.", 502, "request_error")
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Resposta inesperada da OpenWeatherMap para '{cidade}': {e}")
            return OpenWeatherService._erro("Resposta inválida do serviço de clima.", 502, "invalid_response")
