"""Core types for the MEV Academy backend."""

from mev_academy.core.types import (
    ApiModel,
    ArbitrageCalculation,
    CurrentGas,
    GasSnapshot,
    MevCategory,
    MevStats,
    MevTransaction,
    Opportunity,
    ProtectionAnalysis,
    RiskLevel,
    Trend,
    TrendPoint,
    TxStatus,
)


__all__ = [
    "ApiModel",
    "ArbitrageCalculation",
    "CurrentGas",
    "GasSnapshot",
    "MevCategory",
    "MevStats",
    "MevTransaction",
    "Opportunity",
    "ProtectionAnalysis",
    "RiskLevel",
    "Trend",
    "TrendPoint",
    "TxStatus",
]
