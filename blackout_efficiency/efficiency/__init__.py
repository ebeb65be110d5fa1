"""
blackout_efficiency.efficiency — Sources of transfer efficiency results.

Modules:
  source — ``EfficiencyCalculator`` protocol and the report-backed
           ``ReportEfficiencySource`` implementation.
"""
