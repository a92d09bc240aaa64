"""InsureClaim: insurance policy, claim and payment management API."""

__version__ = "0.1.0"
