"""Enumerations for fiscal domain models."""

from enum import Enum


class Anexo(str, Enum):
    """Simples Nacional annexes (LC 123/2006)."""

    I = "I"  # Comércio
    II = "II"  # Indústria
    III = "III"  # Serviços (locação, instalação, agências...)
    IV = "IV"  # Serviços (construção, vigilância, limpeza, advocacia)
    V = "V"  # Serviços intelectuais (sujeitos ao fator R)


class AtividadeMEI(str, Enum):
    """MEI activity groups, which fix the DAS-MEI composition."""

    COMERCIO = "comercio"
    SERVICOS = "servicos"
    COMERCIO_SERVICOS = "comercio_servicos"


class Regime(str, Enum):
    """Tax regimes compared by the simulator."""

    SIMPLES_NACIONAL = "Simples Nacional"
    LUCRO_PRESUMIDO = "Lucro Presumido"
    LUCRO_REAL = "Lucro Real"
