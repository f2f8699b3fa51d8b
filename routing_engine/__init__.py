"""
Routing & SLA Policy Simulation Engine

Decision-support estimator for splitting projected order volume across
fulfillment vendors under a routing policy:

- Scores and normalizes vendor allocation shares for a demand scenario
- Projects per-vendor fulfillment time and SLA-breach probability
- Derives failover ordering from declared vendor priorities
- Rebalances static policy weights by vendor capacity
- Gates promotion of a policy to the external orchestrator
"""

__version__ = "0.1.0"
