"""
Tool suites

Each module exposes ``register_<suite>_tools(registry)``. ``build_registry``
wires up the suites enabled in Config (all five by default).
"""

import logging
from typing import Iterable, Optional

from ..config import SUITES, Config
from ..registry import ToolRegistry
from .analysis_tools import register_analysis_tools
from .document_tools import register_document_tools
from .financial_tools import register_financial_tools
from .knowledge_tools import register_knowledge_tools
from .market_research_tools import register_market_research_tools
from .orchestration_tools import register_orchestration_tools

logger = logging.getLogger(__name__)

# suite -> registration functions, in listing order
SUITE_REGISTRARS = {
    "business-consultant": (register_analysis_tools, register_financial_tools),
    "document-generation": (register_document_tools,),
    "knowledge-base": (register_knowledge_tools,),
    "market-research": (register_market_research_tools,),
    "orchestration": (register_orchestration_tools,),
}


def build_registry(suites: Optional[Iterable[str]] = None) -> ToolRegistry:
    """
    Create a registry holding every tool of the requested suites

    Args:
        suites: Suite names to enable (default: Config.ENABLED_SUITES)

    Returns:
        Populated ToolRegistry

    Raises:
        ValueError: If a suite name is unknown
    """
    enabled = tuple(suites) if suites is not None else Config.ENABLED_SUITES

    unknown = [s for s in enabled if s not in SUITE_REGISTRARS]
    if unknown:
        raise ValueError(f"Unknown tool suites: {', '.join(unknown)} (expected any of {', '.join(SUITES)})")

    registry = ToolRegistry()
    for suite in SUITES:
        if suite not in enabled:
            continue
        for register in SUITE_REGISTRARS[suite]:
            register(registry)
        logger.debug(f"Suite {suite}: {len(registry.names(suite))} tools")

    logger.info(f"Registered {len(registry)} tools from {len(enabled)} suites")
    return registry
