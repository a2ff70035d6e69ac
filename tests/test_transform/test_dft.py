"""Tests for the truncated discrete Fourier transform."""

import math

import numpy as np
import pytest
from pydantic import ValidationError

from fourierdraw import InvalidInputError
from fourierdraw.models import DrawnPath, Point
from fourierdraw.transform import (
    canvas_origin,
    compute_coefficients,
    evaluate,
    reconstruction_error,
)


def reference_dft(path: DrawnPath, k: int, origin=(0.0, 0.0)) -> np.ndarray:
    """First k bins of numpy's FFT, normalized by 1/N."""
    z = np.array([complex(p.x - origin[0], p.y - origin[1]) for p in path])
    n = len(z)
    bins = np.arange(k) % n
    return np.fft.fft(z)[bins] / n


class TestComputeCoefficients:
    """Tests for compute_coefficients."""

    def test_returns_exactly_k_coefficients(self, scribble_path):
        """Test K coefficients with freq a permutation of 0..K-1."""
        coeffs = compute_coefficients(scribble_path, 7, origin=(150, 120))

        assert len(coeffs) == 7
        assert sorted(c.freq for c in coeffs) == list(range(7))

    def test_sorted_by_descending_amplitude(self, scribble_path):
        """Test amplitudes never increase along the set."""
        coeffs = compute_coefficients(scribble_path, 11, origin=(150, 120))

        amps = [c.amp for c in coeffs]
        assert all(a >= b for a, b in zip(amps, amps[1:]))

    def test_dc_term_is_centroid(self, scribble_path):
        """Test the freq 0 term equals the mean of the translated samples."""
        origin = (200.0, 150.0)
        coeffs = compute_coefficients(scribble_path, 5, origin=origin)

        dc = coeffs.by_frequency(0)
        xs = [p.x - origin[0] for p in scribble_path]
        ys = [p.y - origin[1] for p in scribble_path]
        assert dc.re == pytest.approx(sum(xs) / len(xs))
        assert dc.im == pytest.approx(sum(ys) / len(ys))

    def test_matches_reference_fft(self, scribble_path):
        """Test every bin against numpy's FFT."""
        origin = (150.0, 120.0)
        coeffs = compute_coefficients(scribble_path, 6, origin=origin)
        expected = reference_dft(scribble_path, 6, origin)

        for c in coeffs:
            assert c.re == pytest.approx(expected[c.freq].real, abs=1e-9)
            assert c.im == pytest.approx(expected[c.freq].imag, abs=1e-9)
            assert c.amp == pytest.approx(abs(expected[c.freq]), abs=1e-9)

    def test_amp_and_phase_derived_from_components(self, scribble_path):
        """Test amp and phase are the polar form of (re, im)."""
        coeffs = compute_coefficients(scribble_path, 4, origin=(150, 120))

        for c in coeffs:
            assert c.amp == pytest.approx(math.sqrt(c.re ** 2 + c.im ** 2))
            assert c.phase == pytest.approx(math.atan2(c.im, c.re))

    def test_square_example(self, square_path):
        """Test the 10x10 square against the reference DFT to 6 places."""
        coeffs = compute_coefficients(square_path, 4)
        expected = reference_dft(square_path, 4)

        assert len(coeffs) == 4
        for c in coeffs:
            assert round(c.re, 6) == round(expected[c.freq].real, 6)
            assert round(c.im, 6) == round(expected[c.freq].imag, 6)
            assert round(c.amp, 6) == round(abs(expected[c.freq]), 6)

        dc = coeffs.by_frequency(0)
        assert dc.re == pytest.approx(5.0)
        assert dc.im == pytest.approx(5.0)
        assert round(dc.amp, 6) == round(math.sqrt(50), 6)
        # DC and freq 1 share the largest amplitude
        assert {c.freq for c in coeffs.coefficients[:2]} == {0, 1}
        assert coeffs[0].amp == pytest.approx(7.071068, abs=1e-6)

    def test_square_example_on_canvas(self, square_path):
        """Test the square measured from the centre of a 100x100 canvas."""
        origin = canvas_origin(100, 100)
        coeffs = compute_coefficients(square_path, 4, origin=origin)
        expected = reference_dft(square_path, 4, origin)

        assert coeffs[0].freq == 0
        assert coeffs[0].re == pytest.approx(-45.0)
        assert coeffs[0].im == pytest.approx(-45.0)
        for c in coeffs:
            assert round(c.amp, 6) == round(abs(expected[c.freq]), 6)

    def test_ties_keep_frequency_order(self):
        """Test equal amplitudes stay in ascending frequency order."""
        path = DrawnPath.from_xy([(50, 50)] * 6)
        coeffs = compute_coefficients(path, 6, origin=(50, 50))

        assert [c.freq for c in coeffs] == [0, 1, 2, 3, 4, 5]
        assert all(c.amp == 0.0 for c in coeffs)

    def test_more_coefficients_than_samples(self, square_path):
        """Test K > N is accepted and aliases onto existing bins."""
        coeffs = compute_coefficients(square_path, 6)

        assert len(coeffs) == 6
        assert coeffs.by_frequency(4).re == pytest.approx(coeffs.by_frequency(0).re)
        assert coeffs.by_frequency(4).im == pytest.approx(coeffs.by_frequency(0).im)
        assert coeffs.by_frequency(5).amp == pytest.approx(coeffs.by_frequency(1).amp)

    def test_single_point_path(self):
        """Test a one-sample path yields the translated sample as every bin."""
        coeffs = compute_coefficients([(3.0, 4.0)], 3)

        assert coeffs.path_length == 1
        for c in coeffs:
            assert c.re == pytest.approx(3.0)
            assert c.im == pytest.approx(4.0)
            assert c.amp == pytest.approx(5.0)

    def test_accepts_points_and_pairs(self, scribble_path):
        """Test DrawnPath, Point lists and tuple lists give the same result."""
        from_model = compute_coefficients(scribble_path, 3)
        from_points = compute_coefficients(list(scribble_path.points), 3)
        from_pairs = compute_coefficients([p.as_tuple() for p in scribble_path], 3)

        assert from_model == from_points == from_pairs

    def test_records_path_length_and_origin(self, scribble_path):
        """Test metadata carried with the set."""
        coeffs = compute_coefficients(scribble_path, 2, origin=(400, 300))

        assert coeffs.path_length == len(scribble_path)
        assert coeffs.origin == (400.0, 300.0)

    def test_result_is_immutable(self, square_path):
        """Test coefficients cannot be modified after sorting."""
        coeffs = compute_coefficients(square_path, 2)

        with pytest.raises(ValidationError):
            coeffs[0].amp = 0.0

    def test_does_not_modify_path(self, scribble_path):
        """Test the input path is left untouched."""
        before = [p.as_tuple() for p in scribble_path]
        compute_coefficients(scribble_path, 5, origin=(10, 10))

        assert [p.as_tuple() for p in scribble_path] == before


class TestInvalidInput:
    """Tests for rejected input."""

    def test_empty_path(self):
        """Test an empty path is rejected."""
        with pytest.raises(InvalidInputError, match="at least one point"):
            compute_coefficients(DrawnPath(), 3)

    def test_empty_list(self):
        """Test an empty list is rejected."""
        with pytest.raises(InvalidInputError):
            compute_coefficients([], 3)

    @pytest.mark.parametrize("k", [0, -1, -50])
    def test_non_positive_count(self, square_path, k):
        """Test K < 1 is rejected."""
        with pytest.raises(InvalidInputError, match=">= 1"):
            compute_coefficients(square_path, k)

    @pytest.mark.parametrize("k", [2.5, "3", None, True])
    def test_non_integer_count(self, square_path, k):
        """Test K must be an integer."""
        with pytest.raises(InvalidInputError, match="integer"):
            compute_coefficients(square_path, k)

    def test_numpy_integer_count(self, square_path):
        """Test numpy integers are accepted."""
        coeffs = compute_coefficients(square_path, np.int64(3))
        assert len(coeffs) == 3

    def test_samples_with_extra_coordinates(self):
        """Test 3-tuples are rejected instead of being reshaped into pairs."""
        with pytest.raises(InvalidInputError, match="shape"):
            compute_coefficients([(1, 2, 3), (4, 5, 6)], 2)

    def test_ragged_samples(self):
        """Test samples of mixed length are rejected."""
        with pytest.raises(InvalidInputError, match=r"\(x, y\) pairs"):
            compute_coefficients([(1, 2), (3,)], 2)

    def test_non_numeric_samples(self):
        """Test samples that are not numbers are rejected."""
        with pytest.raises(InvalidInputError):
            compute_coefficients([("a", "b"), (1, 2)], 2)

    def test_bare_numbers(self):
        """Test a flat list of numbers is not a path."""
        with pytest.raises(InvalidInputError):
            compute_coefficients([1.0, 2.0, 3.0, 4.0], 2)


class TestEvaluate:
    """Tests for evaluate and reconstruction_error."""

    def test_full_spectrum_recovers_first_sample(self, scribble_path):
        """Test K = N reconstructs the first sample at t = 0."""
        origin = (150.0, 120.0)
        coeffs = compute_coefficients(scribble_path, len(scribble_path), origin=origin)

        z = evaluate(coeffs, 0.0)

        assert z.real == pytest.approx(scribble_path[0].x - origin[0], abs=1e-9)
        assert z.imag == pytest.approx(scribble_path[0].y - origin[1], abs=1e-9)

    def test_circle_reconstructed_by_one_term(self, circle_path):
        """Test a sampled circle is carried almost entirely by freq 1."""
        coeffs = compute_coefficients(circle_path, 8, origin=(400, 300))

        assert coeffs[0].freq == 1
        assert coeffs[0].amp == pytest.approx(100.0)
        assert coeffs[1].amp == pytest.approx(0.0, abs=1e-9)

        quarter = evaluate(coeffs, math.pi / 2)
        assert quarter.real == pytest.approx(0.0, abs=1e-6)
        assert quarter.imag == pytest.approx(100.0, abs=1e-6)

    def test_scale_multiplies_result(self, scribble_path):
        """Test scale stretches the reconstruction linearly."""
        coeffs = compute_coefficients(scribble_path, 4)

        assert evaluate(coeffs, 1.3, scale=2.0) == pytest.approx(2 * evaluate(coeffs, 1.3))

    def test_full_spectrum_has_no_reconstruction_error(self, scribble_path):
        """Test K = N reproduces every sample."""
        coeffs = compute_coefficients(
            scribble_path, len(scribble_path), origin=canvas_origin(400, 300)
        )

        assert reconstruction_error(scribble_path, coeffs) == pytest.approx(0.0, abs=1e-9)

    def test_reconstruction_error_shrinks_with_more_terms(self, scribble_path):
        """Test adding terms never makes the fit worse."""
        origin = canvas_origin(400, 300)
        errors = [
            reconstruction_error(scribble_path, compute_coefficients(scribble_path, k, origin))
            for k in (1, 3, 6, 11)
        ]

        assert all(a >= b - 1e-9 for a, b in zip(errors, errors[1:]))
        assert errors[0] > 0

    def test_single_term_error(self, square_path):
        """Test one term leaves the RMS distance to the centroid."""
        coeffs = compute_coefficients(square_path, 1)

        assert reconstruction_error(square_path, coeffs) == pytest.approx(math.sqrt(50))
