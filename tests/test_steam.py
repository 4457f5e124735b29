from unittest import TestCase
from sandlerif97 import (properties_from_pressure_temperature,
                         properties_from_pressure_enthalpy,
                         properties_from_pressure_entropy,
                         properties_from_pressure_quality,
                         properties_from_temperature_quality,
                         saturation_by_pressure, valid_range_for,
                         Phase, Region, PropertyKind, SolverSettings,
                         OutOfDomainError, ConvergenceError)
import logging

logger = logging.getLogger(__name__)

class TestPressureTemperature(TestCase):

    def test_verification_values(self):
        # (P MPa, T K) -> region, h, s, v
        table = [
            ((3, 300), (Region.R1, .115331273e3, .392294792, .100215168e-2)),
            ((3, 500), (Region.R1, .975542239e3, .258041912e1, .120241800e-2)),
            ((.0035, 700), (Region.R2, .333568375e4, .101749996e2, .923015898e2)),
            ((30, 700), (Region.R2, .263149474e4, .517540298e1, .542946619e-2)),
            ((.255837018e2, 650), (Region.R3, .186343019e4, .405427273e1, 1 / 500)),
            ((.783095639e2, 750), (Region.R3, .225868845e4, .446971906e1, 1 / 500)),
        ]
        for (p, T), (region, h, s, v) in table:
            with self.subTest(P=p, T=T):
                state = properties_from_pressure_temperature(p, T)
                self.assertEqual(state.region, region)
                self.assertAlmostEqual(state.specific_enthalpy / h, 1.0, places=6)
                self.assertAlmostEqual(state.specific_entropy / s, 1.0, places=6)
                self.assertAlmostEqual(state.specific_volume / v, 1.0, places=6)
                self.assertIsNone(state.quality)
                self.assertFalse(state.is_mixture)

    def test_region3_keeps_requested_pressure(self):
        for p, T in [(.255837018e2, 650), (.222930643e2, 650), (.783095639e2, 750), (25.0, 650)]:
            with self.subTest(P=p, T=T):
                state = properties_from_pressure_temperature(p, T)
                self.assertEqual(state.region, Region.R3)
                self.assertEqual(state.pressure, p)
                self.assertTrue(state.converged)

    def test_phase(self):
        self.assertEqual(properties_from_pressure_temperature(1, 300).phase, Phase.LIQUID)
        self.assertEqual(properties_from_pressure_temperature(1, 500).phase, Phase.GAS)

    def test_out_of_domain(self):
        with self.assertRaises(OutOfDomainError):
            properties_from_pressure_temperature(101, 500)
        with self.assertRaises(OutOfDomainError):
            properties_from_pressure_temperature(1, 1100)

class TestPressureEnthalpyEntropy(TestCase):

    points = [
        (0.01, 273.15), (0.01, 500), (0.01, 1073.15),
        (3, 300), (3, 700), (0.1, 500),
        (8, 700), (16, 600), (80, 500),
        (25, 900), (40, 750), (100, 1000),
        (.255837018e2, 650), (.222930643e2, 650), (.783095639e2, 750),
    ]

    def test_enthalpy_round_trip(self):
        for p, T in self.points:
            with self.subTest(P=p, T=T):
                h = properties_from_pressure_temperature(p, T).specific_enthalpy
                state = properties_from_pressure_enthalpy(p, h)
                self.assertAlmostEqual(state.temperature, T, delta=1e-6)
                self.assertAlmostEqual(state.pressure, p, delta=1e-12)

    def test_entropy_round_trip(self):
        for p, T in self.points:
            with self.subTest(P=p, T=T):
                s = properties_from_pressure_temperature(p, T).specific_entropy
                state = properties_from_pressure_entropy(p, s)
                self.assertAlmostEqual(state.temperature, T, delta=1e-6)

    def test_region_tags(self):
        cases = [
            (3, 300, Region.R1),
            (3, 700, Region.R2A),
            (8, 700, Region.R2B),
            (40, 750, Region.R2C),
            (.255837018e2, 650, Region.R3),
        ]
        for p, T, region in cases:
            with self.subTest(P=p, T=T):
                h = properties_from_pressure_temperature(p, T).specific_enthalpy
                self.assertEqual(properties_from_pressure_enthalpy(p, h).region, region)

    def test_entropy_subregion_threshold(self):
        # below 5.85 kJ/kg-K the 2c correlation applies
        s = properties_from_pressure_temperature(80, 900).specific_entropy
        self.assertLess(s, 5.85)
        self.assertEqual(properties_from_pressure_entropy(80, s).region, Region.R2C)
        s = properties_from_pressure_temperature(8, 700).specific_entropy
        self.assertGreaterEqual(s, 5.85)
        self.assertEqual(properties_from_pressure_entropy(8, s).region, Region.R2B)

    def test_mixture_midpoint(self):
        # above 16.5291643 MPa the saturated liquid lies in region 3
        for p, tag in [(0.01, '1&2'), (0.1, '1&2'), (1.0, '1&2'), (5.0, '1&2'), (10.0, '1&2'),
                       (16.0, '1&2'), (18.0, '3&2'), (20.0, '3&2')]:
            with self.subTest(P=p):
                pair = saturation_by_pressure(p)
                liquid, gas = pair.saturated_liquid, pair.saturated_gas
                h = (liquid.specific_enthalpy + gas.specific_enthalpy) / 2
                s = (liquid.specific_entropy + gas.specific_entropy) / 2
                for state in properties_from_pressure_enthalpy(p, h), properties_from_pressure_entropy(p, s):
                    self.assertAlmostEqual(state.pressure, p, delta=1e-6)
                    self.assertAlmostEqual(state.quality, 0.5, delta=1e-6)
                    self.assertAlmostEqual(state.specific_enthalpy, h, delta=1e-6)
                    self.assertAlmostEqual(state.specific_entropy, s, delta=1e-6)
                    self.assertEqual(state.phase, Phase.SATURATED)
                    self.assertEqual(state.region, tag)
                    self.assertTrue(state.is_mixture)
                    self.assertIsNone(state.isobaric_heat_capacity)
                    self.assertAlmostEqual(state.density * state.specific_volume, 1.0, places=12)

    def test_target_out_of_range(self):
        low, high = valid_range_for(1.0, PropertyKind.ENTHALPY)
        with self.assertRaises(OutOfDomainError):
            properties_from_pressure_enthalpy(1.0, low - 1.0)
        with self.assertRaises(OutOfDomainError):
            properties_from_pressure_enthalpy(1.0, high + 1.0)
        low, high = valid_range_for(1.0, PropertyKind.ENTROPY)
        with self.assertRaises(OutOfDomainError):
            properties_from_pressure_entropy(1.0, high + 0.1)
        with self.assertRaises(OutOfDomainError):
            properties_from_pressure_enthalpy(0.0, 1000.0)

    def test_below_triple_point_pressure(self):
        # no liquid below the triple-point saturation pressure
        h = properties_from_pressure_temperature(0.0005, 400).specific_enthalpy
        state = properties_from_pressure_enthalpy(0.0005, h)
        self.assertEqual(state.region, Region.R2A)
        self.assertAlmostEqual(state.temperature, 400, delta=1e-6)

    def test_region3_cap(self):
        p, T = .783095639e2, 750
        h = properties_from_pressure_temperature(p, T).specific_enthalpy
        with self.assertLogs('sandlerif97.backward', level='WARNING'):
            state = properties_from_pressure_enthalpy(p, h, SolverSettings(region3_maxiter=1))
        self.assertFalse(state.converged)
        with self.assertRaises(ConvergenceError):
            properties_from_pressure_enthalpy(p, h, SolverSettings(region3_maxiter=1, strict=True))

class TestQuality(TestCase):

    def test_pressure_quality(self):
        pair = saturation_by_pressure(1.0)
        state = properties_from_pressure_quality(1.0, 0.25)
        expected = 0.75 * pair.saturated_liquid.specific_enthalpy + 0.25 * pair.saturated_gas.specific_enthalpy
        self.assertAlmostEqual(state.specific_enthalpy, expected, places=9)
        self.assertEqual(state.quality, 0.25)
        self.assertEqual(state.temperature, pair.temperature)

    def test_temperature_quality(self):
        state = properties_from_temperature_quality(373.15, 1.0)
        self.assertAlmostEqual(state.pressure, 0.101418, places=5)
        self.assertAlmostEqual(state.specific_enthalpy, state.saturated_gas.specific_enthalpy, places=9)

    def test_quality_out_of_range(self):
        with self.assertRaises(OutOfDomainError):
            properties_from_pressure_quality(1.0, 1.5)
        with self.assertRaises(OutOfDomainError):
            properties_from_temperature_quality(373.15, -0.1)

class TestValidRange(TestCase):

    def test_temperature(self):
        self.assertEqual(valid_range_for(10, PropertyKind.TEMPERATURE), (273.15, 1073.15))

    def test_enthalpy(self):
        low, high = valid_range_for(10, PropertyKind.ENTHALPY)
        self.assertEqual(low, properties_from_pressure_temperature(10, 273.15).specific_enthalpy)
        self.assertEqual(high, properties_from_pressure_temperature(10, 1073.15).specific_enthalpy)
        self.assertLess(low, high)

    def test_accepts_field_name(self):
        self.assertEqual(valid_range_for(10, 'specific_entropy'), valid_range_for(10, PropertyKind.ENTROPY))

    def test_out_of_domain(self):
        with self.assertRaises(OutOfDomainError):
            valid_range_for(150, PropertyKind.ENTHALPY)
