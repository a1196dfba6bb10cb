class InvalidParameterError(ValueError):
    """Raised when a solver or configuration is built from invalid inputs.

    This error is raised at construction time by :class:`~heat_equation.types.Material`,
    the configuration dataclasses in :mod:`heat_equation.config` and the solver
    factories, before any array is allocated.

    Notes
    -----
    Typical causes are:

    - fewer than two grid points (the spatial step ``L / (n - 1)`` is undefined)
    - a non-positive domain length or simulation time
    - a non-positive conductivity, density or specific heat
    """
