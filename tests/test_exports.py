import unittest
from chainroi.exports.writers import write_cash_flows, write_breakdown, SCHEMAS
from chainroi.exports.reports import assumptions_md, fmt_money, fmt_pct, summary_md, validation_report_md
import csv
import io

class TestExports(unittest.TestCase):
    def test_cash_flows_csv(self):
        rows = [{
            "year": 1, "adoption": 0.2, "chain_cash_flow": -1000, "cumulative_cash_flow": -1000,
            "discount_factor": 0.909, "pv_cash_flow": -909, "cost_flow": 1200, "pv_cost_flow": 1090.9,
            "ignored": "x",
        }]
        csv_text = write_cash_flows(rows)
        reader = csv.DictReader(io.StringIO(csv_text))
        recs = list(reader)
        self.assertEqual(len(recs), 1)
        self.assertEqual(recs[0]["chain_cash_flow"], "-1000")
        self.assertEqual(reader.fieldnames, SCHEMAS["cash_flows"])

    def test_breakdown_csv(self):
        txt = write_breakdown([{"driver": "compliance_value", "label": "Compliance saving", "amount_per_store": 10000}])
        self.assertIn("driver,label,amount_per_store", txt.splitlines()[0])
        self.assertIn("compliance_value", txt)

    def test_formatting(self):
        self.assertEqual(fmt_money(-82_860_841.47, "NOK"), "-82,860,841 NOK")
        self.assertEqual(fmt_money(0.4, "EUR"), "0 EUR")
        self.assertEqual(fmt_pct(-0.91357), "-91.4%")

    def test_reports_md(self):
        a = assumptions_md({"discount_rate": "10.0%", "store_count": 100}, warnings=["no subscription cost: ROI reported as 0"])
        self.assertIn("# Assumptions", a)
        self.assertIn("## Warnings", a)
        v = validation_report_md({"breakdown_additive": True, "inputs_in_range": False}, details={"horizon_years": 3})
        self.assertIn("# Validation Report", v)
        self.assertIn("- inputs_in_range: FAIL", v)

    def test_summary_md(self):
        kpis = {"roi": 0.25, "npv": 1_500_000.4, "payback_years": 2, "discount_rate": 0.1}
        s = summary_md(kpis, [-10.0, 20.0, 30.0], [("Waste reduction", 6000.0)], 31_850.0, "USD")
        self.assertIn("ROI (NPV-based): 25.0%", s)
        self.assertIn("Payback (years): 2", s)
        self.assertIn("NPV (chain): 1,500,000 USD", s)
        self.assertIn("- Year 3: 30 USD", s)
        self.assertIn("- Net after subscription: 31,850 USD", s)

if __name__ == '__main__':
    unittest.main()
