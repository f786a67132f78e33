"""Filament diameter ratio calculation."""


def calculate_diameter_ratio(input_diameter: float, output_diameter: float) -> float:
    """Calculate the extrusion correction factor between two filament diameters.

    The factor is the ratio of the filament cross-section areas, which reduces
    to the ratio of the squared radii:

        ((input_diameter / 2)^2) / ((output_diameter / 2)^2)

    Args:
        input_diameter: Filament diameter the input file was sliced for (mm)
        output_diameter: Filament diameter loaded in the added extruder (mm)

    Returns:
        Multiplicative correction for extrusion distances. Exactly 1.0 when
        both diameters are equal.

    Raises:
        ValueError: If either diameter is not positive

    Examples:
        >>> calculate_diameter_ratio(1.75, 1.75)
        1.0

        >>> round(calculate_diameter_ratio(2.0, 1.6), 6)
        1.5625
    """
    if input_diameter <= 0:
        raise ValueError(f"input_diameter must be positive, got {input_diameter}")
    if output_diameter <= 0:
        raise ValueError(f"output_diameter must be positive, got {output_diameter}")

    if input_diameter == output_diameter:
        return 1.0

    input_radius = input_diameter / 2
    output_radius = output_diameter / 2
    return (input_radius * input_radius) / (output_radius * output_radius)
