"""
Multi-cloud pipeline deployer.

Renders a provider-specific pod manifest from a run configuration and runs
the Checkout -> Build -> Deploy pipeline, dispatching the deploy step to the
configured cloud provider's strategy.
"""

__version__ = "1.0.0"
