import math
from dataclasses import dataclass

from .exceptions import InvalidParameterError

KELVIN_OFFSET = 273.15


def celsius_to_kelvin(t_celsius: float) -> float:
    return float(t_celsius) + KELVIN_OFFSET


@dataclass(frozen=True, slots=True)
class Material:
    """Physical constants of a conducting material.

    Parameters
    ----------
    name : str
        Display name. Not used by the numerics.
    conductivity : float
        Thermal conductivity :math:`\\lambda` in W/(m K).
    density : float
        Density :math:`\\rho` in kg/m^3.
    specific_heat : float
        Specific heat :math:`c` in J/(kg K).

    Notes
    -----
    Instances are immutable and can be shared between any number of solvers.
    """

    name: str
    conductivity: float
    density: float
    specific_heat: float

    def __post_init__(self) -> None:
        for label in ("conductivity", "density", "specific_heat"):
            value = float(getattr(self, label))
            if not math.isfinite(value) or value <= 0.0:
                raise InvalidParameterError(f"{label} must be finite and > 0")

    @property
    def heat_capacity(self) -> float:
        """Volumetric heat capacity :math:`\\rho c` in J/(m^3 K)."""
        return float(self.density) * float(self.specific_heat)

    def alpha(self) -> float:
        """Thermal diffusivity :math:`\\lambda / (\\rho c)` in m^2/s."""
        return float(self.conductivity) / self.heat_capacity


COPPER = Material("Copper", conductivity=389.0, density=8940.0, specific_heat=380.0)
IRON = Material("Iron", conductivity=80.2, density=7874.0, specific_heat=440.0)
GLASS = Material("Glass", conductivity=1.2, density=2530.0, specific_heat=840.0)
POLYSTYRENE = Material(
    "Polystyrene", conductivity=0.1, density=1040.0, specific_heat=1200.0
)

MATERIALS: dict[str, Material] = {
    "copper": COPPER,
    "iron": IRON,
    "glass": GLASS,
    "polystyrene": POLYSTYRENE,
}


def get_material(name: str) -> Material:
    key = str(name).lower().strip()
    try:
        return MATERIALS[key]
    except KeyError as e:
        raise KeyError(
            f"Unknown material '{name}'. Available: {', '.join(sorted(MATERIALS))}"
        ) from e
