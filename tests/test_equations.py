from unittest import TestCase
from sandlerif97 import equations as eq
from sandlerif97 import Phase, Region, OutOfDomainError
from sandlerif97.region3 import solve_region3
import logging

logger = logging.getLogger(__name__)

class TestEquations(TestCase):

    def assertRelativelyClose(self, actual, expected, places=7):
        self.assertAlmostEqual(actual / expected, 1.0, places=places)

    def test_region1_verification_values(self):
        # (P MPa, T K) -> v, h, s, u, cp, w
        table = [
            ((3, 300), (.100215168e-2, .115331273e3, .392294792, .112324818e3, .417301218e1, .150773921e4)),
            ((80, 300), (.971180894e-3, .184142828e3, .368563852, .106448356e3, .401008987e1, .163469054e4)),
            ((3, 500), (.120241800e-2, .975542239e3, .258041912e1, .971934985e3, .465580682e1, .124071337e4)),
        ]
        for (p, T), (v, h, s, u, cp, w) in table:
            with self.subTest(P=p, T=T):
                state = eq.region1(p, T)
                self.assertRelativelyClose(state.specific_volume, v)
                self.assertRelativelyClose(state.specific_enthalpy, h)
                self.assertRelativelyClose(state.specific_entropy, s)
                self.assertRelativelyClose(state.internal_energy, u, places=6)
                self.assertRelativelyClose(state.isobaric_heat_capacity, cp, places=6)
                self.assertRelativelyClose(state.speed_of_sound, w, places=6)
                self.assertEqual(state.region, Region.R1)
                self.assertEqual(state.phase, Phase.LIQUID)

    def test_region2_verification_values(self):
        table = [
            ((.0035, 300), (.394913866e2, .254991145e4, .852238967e1, .241169160e4, .191300162e1, .427920172e3)),
            ((.0035, 700), (.923015898e2, .333568375e4, .101749996e2, .301262819e4, .208141274e1, .644289068e3)),
            ((30, 700), (.542946619e-2, .263149474e4, .517540298e1, .246861076e4, .103505092e2, .480386523e3)),
        ]
        for (p, T), (v, h, s, u, cp, w) in table:
            with self.subTest(P=p, T=T):
                state = eq.region2(p, T)
                self.assertRelativelyClose(state.specific_volume, v)
                self.assertRelativelyClose(state.specific_enthalpy, h)
                self.assertRelativelyClose(state.specific_entropy, s)
                self.assertRelativelyClose(state.internal_energy, u, places=6)
                self.assertRelativelyClose(state.isobaric_heat_capacity, cp, places=6)
                self.assertRelativelyClose(state.speed_of_sound, w, places=6)
                self.assertEqual(state.region, Region.R2)
                self.assertEqual(state.phase, Phase.GAS)

    def test_region3_verification_values(self):
        # (rho kg/m3, T K) -> p, h, s, u, cp, w
        table = [
            ((500, 650), (.255837018e2, .186343019e4, .405427273e1, .181226279e4, .138935717e2, .502005554e3)),
            ((200, 650), (.222930643e2, .237512401e4, .485438792e1, .226365868e4, .446579342e2, .383444594e3)),
            ((500, 750), (.783095639e2, .225868845e4, .446971906e1, .210206932e4, .634165359e1, .760696041e3)),
        ]
        for (rho, T), (p, h, s, u, cp, w) in table:
            with self.subTest(rho=rho, T=T):
                state = eq.region3_density(rho, T)
                self.assertRelativelyClose(state.pressure, p)
                self.assertRelativelyClose(state.specific_enthalpy, h)
                self.assertRelativelyClose(state.specific_entropy, s)
                self.assertRelativelyClose(state.internal_energy, u, places=6)
                self.assertRelativelyClose(state.isobaric_heat_capacity, cp, places=6)
                self.assertRelativelyClose(state.speed_of_sound, w, places=6)
                self.assertAlmostEqual(state.density, rho, places=8)
                self.assertEqual(state.region, Region.R3)

    def test_saturation_pressure(self):
        for T, p in [(300, .353658941e-2), (500, .263889776e1), (600, .123443146e2)]:
            with self.subTest(T=T):
                self.assertRelativelyClose(eq.saturation_pressure(T), p)

    def test_saturation_temperature(self):
        for p, T in [(.1, .372755919e3), (1, .453035632e3), (10, .584149488e3)]:
            with self.subTest(P=p):
                self.assertRelativelyClose(eq.saturation_temperature(p), T)

    def test_saturation_curve_limits(self):
        self.assertAlmostEqual(eq.saturation_temperature(22.064), 647.096, places=2)
        with self.assertRaises(OutOfDomainError):
            eq.saturation_pressure(273.0)
        with self.assertRaises(OutOfDomainError):
            eq.saturation_pressure(650.0)
        with self.assertRaises(OutOfDomainError):
            eq.saturation_temperature(23.0)
        with self.assertRaises(OutOfDomainError):
            eq.saturation_temperature(1e-5)

    def test_b23_boundary(self):
        self.assertAlmostEqual(eq.b23_pressure(623.15), .165291643e2, places=6)
        self.assertAlmostEqual(eq.b23_temperature(.165291643e2), .62315e3, places=5)

    def test_b23_continuity(self):
        # IF97 consistency limits on the region 2/3 boundary:
        # |dv/v| <= 0.05 %, |dh| <= 0.2 kJ/kg, |ds| <= 0.2 J/(kg K)
        for T in [650.0, 700.0, 750.0, 800.0, 850.0]:
            with self.subTest(T=T):
                p = eq.b23_pressure(T)
                r2 = eq.region2(p, T)
                r3 = solve_region3(p, T)
                self.assertTrue(r3.converged)
                self.assertLess(abs(r2.specific_volume / r3.specific_volume - 1.0), 5.e-4)
                self.assertLess(abs(r2.specific_enthalpy - r3.specific_enthalpy), 0.2)
                self.assertLess(abs(r2.specific_entropy - r3.specific_entropy), 2.e-4)

    def test_b2bc_boundary(self):
        self.assertAlmostEqual(eq.b2bc_pressure(.3516004323e4), .1e3, places=5)
        self.assertAlmostEqual(eq.b2bc_enthalpy(.1e3), .3516004323e4, places=4)

    def test_backward_ph_region1(self):
        for p, h, T in [(3, 500, .391798509e3), (80, 500, .378108626e3), (80, 1500, .611041229e3)]:
            with self.subTest(P=p, h=h):
                self.assertRelativelyClose(eq.backward_ph_region1(p, h), T)

    def test_backward_ps_region1(self):
        for p, s, T in [(3, .5, .307842258e3), (80, .5, .309979785e3), (80, 3, .565899909e3)]:
            with self.subTest(P=p, s=s):
                self.assertRelativelyClose(eq.backward_ps_region1(p, s), T)

    def test_backward_ph_region2(self):
        table = [
            (eq.backward_ph_region2a, [(.001, 3000, .534433241e3), (3, 3000, .575373370e3), (3, 4000, .101077577e4)]),
            (eq.backward_ph_region2b, [(5, 3500, .801299102e3), (5, 4000, .101531583e4), (25, 3500, .875279054e3)]),
            (eq.backward_ph_region2c, [(40, 2700, .743056411e3), (60, 2700, .791137067e3), (60, 3200, .882756860e3)]),
        ]
        for func, points in table:
            for p, h, T in points:
                with self.subTest(func=func.__name__, P=p, h=h):
                    self.assertRelativelyClose(func(p, h), T)

    def test_backward_ps_region2(self):
        table = [
            (eq.backward_ps_region2a, [(.1, 7.5, .399517097e3), (.1, 8, .514127081e3), (2.5, 8, .103984917e4)]),
            (eq.backward_ps_region2b, [(8, 6, .600484040e3), (8, 7.5, .106495556e4), (90, 6, .103801126e4)]),
            (eq.backward_ps_region2c, [(20, 5.75, .697992849e3), (80, 5.25, .854011484e3), (80, 5.75, .949017998e3)]),
        ]
        for func, points in table:
            for p, s, T in points:
                with self.subTest(func=func.__name__, P=p, s=s):
                    self.assertRelativelyClose(func(p, s), T)
