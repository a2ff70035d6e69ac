"""Data models for Fourier coefficients."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FourierCoefficient(BaseModel):
    """One frequency component of the truncated spectrum.

    Attributes:
        re: Real part of the normalized DFT sum
        im: Imaginary part of the normalized DFT sum
        freq: DFT bin index (never renumbered after sorting)
        amp: Magnitude sqrt(re^2 + im^2)
        phase: Angle atan2(im, re)
    """

    re: float
    im: float
    freq: int = Field(ge=0)
    amp: float = Field(ge=0.0)
    phase: float

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> complex:
        return complex(self.re, self.im)


class CoefficientSet(BaseModel):
    """Coefficients ranked by amplitude, largest first.

    Attributes:
        coefficients: Components in amplitude-descending order
        path_length: Number of samples (N) the transform was computed over
        origin: Reference point subtracted from every sample
    """

    coefficients: tuple[FourierCoefficient, ...]
    path_length: int = Field(ge=1)
    origin: tuple[float, float] = (0.0, 0.0)

    model_config = ConfigDict(frozen=True)

    @field_validator("coefficients")
    @classmethod
    def validate_order(
        cls, v: tuple[FourierCoefficient, ...]
    ) -> tuple[FourierCoefficient, ...]:
        """Validate coefficients are sorted by descending amplitude."""
        if not v:
            raise ValueError("Coefficient set must contain at least one coefficient")
        for previous, current in zip(v, v[1:]):
            if current.amp > previous.amp:
                raise ValueError(
                    f"Coefficients must be sorted by amplitude: "
                    f"{current.amp} follows {previous.amp}"
                )
        return v

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self):
        return iter(self.coefficients)

    def __getitem__(self, index: int) -> FourierCoefficient:
        return self.coefficients[index]

    @property
    def radius_sum(self) -> float:
        """Sum of all amplitudes."""
        return sum(c.amp for c in self.coefficients)

    def by_frequency(self, freq: int) -> FourierCoefficient:
        """Look up the coefficient for a DFT bin.

        Raises:
            KeyError: If the bin was not computed
        """
        for coefficient in self.coefficients:
            if coefficient.freq == freq:
                return coefficient
        raise KeyError(freq)
