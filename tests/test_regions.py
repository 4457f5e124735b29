from unittest import TestCase
from sandlerif97 import select_region, Region, OutOfDomainError
from sandlerif97.regions import boundary_pressure
from sandlerif97.equations import saturation_pressure, b23_pressure
import logging

logger = logging.getLogger(__name__)

class TestRegionSelect(TestCase):

    def test_region1(self):
        for p, T in [(3, 300), (80, 300), (3, 500), (100, 273.15)]:
            with self.subTest(P=p, T=T):
                self.assertEqual(select_region(p, T), Region.R1)

    def test_region2(self):
        for p, T in [(.0035, 300), (.0035, 700), (30, 700), (50, 900), (100, 1073.15)]:
            with self.subTest(P=p, T=T):
                self.assertEqual(select_region(p, T), Region.R2)

    def test_region3(self):
        for p, T in [(.255837018e2, 650), (.222930643e2, 650), (.783095639e2, 750)]:
            with self.subTest(P=p, T=T):
                self.assertEqual(select_region(p, T), Region.R3)

    def test_region3_wins_at_623_15(self):
        self.assertEqual(select_region(20, 623.15), Region.R3)
        self.assertEqual(select_region(10, 623.15), Region.R2)

    def test_boundary_pressure(self):
        self.assertEqual(boundary_pressure(500), saturation_pressure(500))
        self.assertEqual(boundary_pressure(700), b23_pressure(700))

    def test_out_of_domain(self):
        for p, T in [(0, 300), (-1, 300), (100.1, 300), (1, 273.0), (1, 1073.2)]:
            with self.subTest(P=p, T=T):
                with self.assertRaises(OutOfDomainError):
                    select_region(p, T)

    def test_out_of_domain_is_value_error(self):
        with self.assertRaises(ValueError):
            select_region(200, 300)
