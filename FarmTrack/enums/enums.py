from enum import Enum

# =====================================================
# 🐔 LOTES
# =====================================================
class BatchStatusEnum(str, Enum):
    active = "active"
    depleted = "depleted"  # Sin animales (mortalidad total / traslado)
    sold = "sold"


# =====================================================
# 📈 CRECIMIENTO / ADG
# =====================================================
class AdgMethodEnum(str, Enum):
    two_samples = "two_samples"  # Dos muestreos más recientes
    single_sample = "single_sample"  # Un muestreo vs. peso inicial
    curve_estimate = "curve_estimate"  # Pendiente de la curva estándar


class PerformanceStatusEnum(str, Enum):
    ahead = "ahead"
    on_track = "on_track"
    behind = "behind"


class AlertSeverityEnum(str, Enum):
    critical = "critical"
    warning = "warning"
    info = "info"


# =====================================================
# 📊 PROYECCIONES
# =====================================================
class UnavailableReasonEnum(str, Enum):
    no_growth_standard = "no_growth_standard"
    insufficient_samples = "insufficient_samples"
    invalid_expected_weight = "invalid_expected_weight"
    no_target_weight = "no_target_weight"
    no_target_price = "no_target_price"
    no_fcr = "no_fcr"
    cannot_reach_target = "cannot_reach_target"
    batch_inactive = "batch_inactive"
