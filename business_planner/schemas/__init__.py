"""Schema validation package

Tool input models and the shared response envelope.
"""

from .tool_schemas import (
    ToolInput,
    SwotAnalysisInput,
    PestAnalysisInput,
    FinancialProjectionsInput,
    MarketResearchInput,
    InnovationInput,
    SupplyChainInput,
    ExecutiveSummaryInput,
    CompanyDescriptionInput,
    MarketingStrategyInput,
    OperationsPlanInput,
    CompileBusinessPlanInput,
    SaveBusinessPlanInput,
    IndustryKnowledgeInput,
    BusinessModelInput,
    RegulationsInput,
    FinancialBenchmarksInput,
    BestPracticesInput,
    TechnologyTrendsInput,
    StoreKnowledgeInput,
    DeepMarketAnalysisInput,
    CompetitiveLandscapeInput,
    CustomerPersonasInput,
    MarketValidationInput,
    CompleteBusinessPlanInput,
    AgenticResearchInput,
    BusinessViabilityInput,
    ResearchStrategyInput,
    GenerationProgressInput,
)

from .response_schemas import (
    TextContent,
    InvocationRequest,
    InvocationResult,
)

__all__ = [
    # Input schemas
    'ToolInput',
    'SwotAnalysisInput',
    'PestAnalysisInput',
    'FinancialProjectionsInput',
    'MarketResearchInput',
    'InnovationInput',
    'SupplyChainInput',
    'ExecutiveSummaryInput',
    'CompanyDescriptionInput',
    'MarketingStrategyInput',
    'OperationsPlanInput',
    'CompileBusinessPlanInput',
    'SaveBusinessPlanInput',
    'IndustryKnowledgeInput',
    'BusinessModelInput',
    'RegulationsInput',
    'FinancialBenchmarksInput',
    'BestPracticesInput',
    'TechnologyTrendsInput',
    'StoreKnowledgeInput',
    'DeepMarketAnalysisInput',
    'CompetitiveLandscapeInput',
    'CustomerPersonasInput',
    'MarketValidationInput',
    'CompleteBusinessPlanInput',
    'AgenticResearchInput',
    'BusinessViabilityInput',
    'ResearchStrategyInput',
    'GenerationProgressInput',
    # Response schemas
    'TextContent',
    'InvocationRequest',
    'InvocationResult',
]
