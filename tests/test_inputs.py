import math
import unittest
from dataclasses import replace

from chainroi.inputs.assumptions import DEFAULT_INPUTS, MAX_STORES, validate_inputs
from chainroi.inputs.boundary import parse_inputs, to_percent_units


class TestValidateInputs(unittest.TestCase):
    def test_defaults_are_valid(self):
        validate_inputs(DEFAULT_INPUTS)  # should not raise

    def test_boundary_values_are_valid(self):
        edge = replace(
            DEFAULT_INPUTS,
            store_count=0, discount_rate=1.0, baseline_gross_margin=0.0,
            sales_uplift_rate=-1.0, margin_improvement_pp=1.0,
            adoption_year1=0.0, adoption_year3=1.0,
        )
        validate_inputs(edge)

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            validate_inputs(replace(DEFAULT_INPUTS, discount_rate=1.5))
        with self.assertRaises(ValueError):
            validate_inputs(replace(DEFAULT_INPUTS, subscription_fee_per_store=-1.0))
        with self.assertRaises(ValueError):
            validate_inputs(replace(DEFAULT_INPUTS, revenue_per_store=math.inf))


class TestParseInputs(unittest.TestCase):
    def test_empty_payload_gives_defaults(self):
        self.assertEqual(parse_inputs({}), DEFAULT_INPUTS)

    def test_percent_units(self):
        i = parse_inputs({"discount_rate": 8, "baseline_gross_margin": 40, "adoption_year1": 50})
        self.assertAlmostEqual(i.discount_rate, 0.08)
        self.assertAlmostEqual(i.baseline_gross_margin, 0.40)
        self.assertAlmostEqual(i.adoption_year1, 0.50)

    def test_fraction_units_and_camel_case(self):
        i = parse_inputs({"storeCount": 12, "discountRate": 0.07, "marginImprovementPP": 0.01}, units="fraction")
        self.assertEqual(i.store_count, 12)
        self.assertAlmostEqual(i.discount_rate, 0.07)
        self.assertAlmostEqual(i.margin_improvement_pp, 0.01)

    def test_clamping(self):
        i = parse_inputs({
            "store_count": 2_000_000.7,
            "revenue_per_store": -10,
            "subscription_fee_per_store": -5,
            "discount_rate": 250,
            "sales_uplift_rate": -300,
            "adoption_year2": 140,
            "compliance_saving_per_store": -1,
        })
        self.assertEqual(i.store_count, MAX_STORES)
        self.assertEqual(i.revenue_per_store, 0.0)
        self.assertEqual(i.subscription_fee_per_store, 0.0)
        self.assertEqual(i.discount_rate, 1.0)
        self.assertEqual(i.sales_uplift_rate, -1.0)
        self.assertEqual(i.adoption_year2, 1.0)
        self.assertEqual(i.compliance_saving_per_store, 0.0)
        validate_inputs(i)

    def test_store_count_is_floored(self):
        self.assertEqual(parse_inputs({"store_count": 9.9}).store_count, 9)
        self.assertIsInstance(parse_inputs({"store_count": 9.9}).store_count, int)

    def test_huge_integer_is_rejected_not_crashing(self):
        with self.assertRaises(ValueError) as ctx:
            parse_inputs({"store_count": 10 ** 400})
        self.assertIn("store_count", str(ctx.exception))
        with self.assertRaises(ValueError):
            parse_inputs({"revenuePerStore": -(10 ** 400)})

    def test_result_always_validates(self):
        i = parse_inputs({"discount_rate": 1e300, "adoption_year3": -1e300, "store_count": 1e300}, units="fraction")
        validate_inputs(i)
        self.assertEqual(i.store_count, MAX_STORES)
        self.assertEqual(i.adoption_year3, 0.0)

    def test_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            parse_inputs({"store_count": "100"})
        with self.assertRaises(ValueError):
            parse_inputs({"discount_rate": float("nan")})
        with self.assertRaises(ValueError):
            parse_inputs({"revenue_per_store": True})
        with self.assertRaises(ValueError):
            parse_inputs({"not_a_field": 1})
        with self.assertRaises(ValueError):
            parse_inputs({}, units="basis_points")

    def test_percent_round_trip_of_defaults(self):
        echoed = to_percent_units(DEFAULT_INPUTS)
        self.assertAlmostEqual(echoed["discount_rate"], 10.0)
        self.assertEqual(echoed["store_count"], 100)
        again = parse_inputs(echoed)
        self.assertAlmostEqual(again.sales_uplift_rate, DEFAULT_INPUTS.sales_uplift_rate)


if __name__ == "__main__":
    unittest.main()
