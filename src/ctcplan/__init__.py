"""ctcplan — slab income tax, take-home and savings projections."""

__version__ = "0.1.0"

from ctcplan.analytics.inverse import CtcEstimate as CtcEstimate
from ctcplan.analytics.inverse import invert_take_home as invert_take_home
from ctcplan.config.defaults import DEFAULT_INCREMENT as DEFAULT_INCREMENT
from ctcplan.config.defaults import default_policy as default_policy
from ctcplan.config.defaults import load_policy_file as load_policy_file
from ctcplan.config.schema import CtcInversionRequest as CtcInversionRequest
from ctcplan.config.schema import RangeSavingsRequest as RangeSavingsRequest
from ctcplan.config.schema import SavingsRequest as SavingsRequest
from ctcplan.config.schema import TakeHomeRequest as TakeHomeRequest
from ctcplan.config.schema import TaxBracket as TaxBracket
from ctcplan.config.schema import TaxPolicy as TaxPolicy
from ctcplan.config.schema import TimeToTargetRequest as TimeToTargetRequest
from ctcplan.core.savings import SavingsResult as SavingsResult
from ctcplan.core.savings import compute_savings as compute_savings
from ctcplan.core.savings import savings_for_range as savings_for_range
from ctcplan.core.sweep import ProjectionPoint as ProjectionPoint
from ctcplan.core.sweep import sweep_range as sweep_range
from ctcplan.core.target import TimeToTarget as TimeToTarget
from ctcplan.core.target import simulate_time_to_target as simulate_time_to_target
from ctcplan.core.target import time_to_target_for_range as time_to_target_for_range
from ctcplan.taxes.slabs import SlabTaxModel as SlabTaxModel
from ctcplan.taxes.slabs import TakeHomeResult as TakeHomeResult
from ctcplan.taxes.slabs import compute_take_home as compute_take_home
from ctcplan.taxes.slabs import compute_tax as compute_tax
