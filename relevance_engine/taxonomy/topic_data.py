"""Topic lexicon table.

Topics carry ``related`` edges (same research conversation) and ``adjacent``
edges (one step removed, used for discovery), plus tiered detection phrases.
``contextual_signals`` hold ambiguous terms that only count when one of the
listed companion terms appears in the same text.

Edges may name ids that have no node of their own; graph walks skip them.
"""

TOPIC_DATA: dict[str, dict] = {
    # INEQUALITY & DISTRIBUTION
    "inequality": {
        "name": "Inequality",
        "related": ["mobility", "poverty", "redistribution", "top_incomes"],
        "adjacent": ["education", "labor", "taxation", "housing", "discrimination"],
        "strong_signals": [
            "inequality", "income inequality", "wealth inequality", "gini coefficient",
            "income distribution", "wealth distribution", "economic inequality",
            "wage inequality", "consumption inequality"
        ],
        "moderate_signals": [
            "top 1%", "top 10%", "income share", "wealth share",
            "distributional effects", "income gap", "wealth gap",
            "lorenz curve", "percentile"
        ],
        "weak_signals": ["unequal"]
    },

    "mobility": {
        "name": "Social Mobility",
        "parent": "inequality",
        "related": ["inequality", "education", "opportunity"],
        "adjacent": ["poverty", "labor", "housing", "segregation"],
        "strong_signals": [
            "social mobility", "intergenerational mobility", "economic mobility",
            "income mobility", "upward mobility", "downward mobility",
            "intergenerational transmission", "rank-rank slope"
        ],
        "moderate_signals": [
            "intergenerational elasticity", "opportunity atlas",
            "american dream", "relative mobility", "absolute mobility",
            "transmission across generations"
        ],
        "weak_signals": []
    },

    "poverty": {
        "name": "Poverty",
        "related": ["inequality", "welfare_programs", "development"],
        "adjacent": ["mobility", "labor", "health", "housing"],
        "strong_signals": [
            "poverty", "poverty rate", "poverty line", "poverty reduction",
            "poverty trap", "poverty measurement", "low-income",
            "extreme poverty", "child poverty"
        ],
        "moderate_signals": [
            "deprivation", "food insecurity", "material hardship",
            "below poverty", "poverty gap"
        ],
        "weak_signals": []
    },

    "welfare_programs": {
        "name": "Welfare & Transfer Programs",
        "parent": "poverty",
        "related": ["poverty", "redistribution", "taxation"],
        "adjacent": ["labor", "health", "family"],
        "strong_signals": [
            "welfare program", "social assistance", "transfer program",
            "safety net", "food stamps", "snap", "eitc", "tanf",
            "conditional cash transfer", "unconditional cash transfer",
            "universal basic income", "social protection"
        ],
        "moderate_signals": [
            "social insurance", "unemployment insurance", "means-tested",
            "benefit receipt", "welfare state", "social spending",
            "disability insurance"
        ],
        "weak_signals": []
    },

    "redistribution": {
        "name": "Redistribution",
        "related": ["inequality", "taxation", "welfare_programs"],
        "adjacent": ["political_economy", "public_economics"],
        "strong_signals": [
            "redistribution", "redistributive", "progressive taxation",
            "redistributive policy", "income redistribution"
        ],
        "moderate_signals": [
            "from rich to poor", "inequality reduction",
            "pre-tax vs post-tax", "fiscal redistribution"
        ],
        "weak_signals": []
    },

    "top_incomes": {
        "name": "Top Incomes & Wealth",
        "parent": "inequality",
        "related": ["inequality", "taxation", "executive_comp"],
        "adjacent": ["finance", "corporate_governance"],
        "strong_signals": [
            "top income", "top 1%", "top 0.1%", "billionaire",
            "wealth concentration", "ultra-high-net-worth", "top earners"
        ],
        "moderate_signals": [
            "wealth tax", "estate tax", "wealth at the top",
            "high earners", "top percentile"
        ],
        "weak_signals": []
    },

    # LABOR & EMPLOYMENT
    "labor": {
        "name": "Labor Markets",
        "related": ["employment", "wages", "human_capital", "monopsony"],
        "adjacent": ["education", "inequality", "immigration", "gender", "automation"],
        "strong_signals": [
            "labor market", "labour market", "labor economics",
            "labor supply", "labor demand", "labor force",
            "labor market outcomes", "labor market effects"
        ],
        "moderate_signals": [
            "workforce", "employment rate", "unemployment rate",
            "occupational choice", "job market", "job displacement"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "worker", "requires": ["wage", "employ", "labor", "job", "occupation", "firm"]}
        ]
    },

    "wages": {
        "name": "Wages & Earnings",
        "parent": "labor",
        "related": ["labor", "inequality", "minimum_wage"],
        "adjacent": ["education", "gender", "immigration", "discrimination"],
        "strong_signals": [
            "wage", "wages", "earnings", "compensation", "pay gap",
            "wage inequality", "wage premium", "wage growth",
            "earnings gap", "wage determination"
        ],
        "moderate_signals": [
            "salary", "hourly pay", "wage distribution",
            "returns to experience", "wage penalty"
        ],
        "weak_signals": []
    },

    "minimum_wage": {
        "name": "Minimum Wage",
        "parent": "wages",
        "related": ["wages", "labor", "policy"],
        "adjacent": ["poverty", "inequality", "employment"],
        "strong_signals": [
            "minimum wage", "minimum wage increase", "minimum wage effect"
        ],
        "moderate_signals": ["wage floor", "living wage", "sub-minimum wage"],
        "weak_signals": []
    },

    "employment": {
        "name": "Employment & Unemployment",
        "parent": "labor",
        "related": ["labor", "business_cycles"],
        "adjacent": ["welfare_programs", "education", "automation"],
        "strong_signals": [
            "employment", "unemployment", "unemployment rate",
            "job loss", "job creation", "employment effects",
            "labor force participation", "jobless"
        ],
        "moderate_signals": [
            "hiring", "layoff", "job search", "job finding rate",
            "labor market tightness", "vacancy"
        ],
        "weak_signals": []
    },

    "human_capital": {
        "name": "Human Capital",
        "related": ["education", "labor", "skills"],
        "adjacent": ["mobility", "wages", "health", "growth"],
        "strong_signals": [
            "human capital", "skill formation", "returns to education",
            "returns to schooling", "human capital accumulation",
            "skill premium"
        ],
        "moderate_signals": [
            "skill", "skills", "training program", "on-the-job training",
            "cognitive skill", "non-cognitive skill"
        ],
        "weak_signals": []
    },

    "monopsony": {
        "name": "Labor Market Power",
        "parent": "labor",
        "related": ["labor", "wages", "industrial_organization"],
        "adjacent": ["antitrust", "inequality"],
        "strong_signals": [
            "monopsony", "labor market concentration", "employer market power",
            "labor market power", "wage-setting power", "oligopsony"
        ],
        "moderate_signals": [
            "labor market concentration", "hiring concentration",
            "non-compete", "no-poach", "wage posting"
        ],
        "weak_signals": []
    },

    "unions": {
        "name": "Unions & Collective Bargaining",
        "parent": "labor",
        "related": ["labor", "wages", "inequality"],
        "adjacent": ["political_economy", "organizations"],
        "strong_signals": [
            "union", "unions", "trade union", "labor union",
            "collective bargaining", "unionization", "unionized"
        ],
        "moderate_signals": [
            "union membership", "union density", "right to work",
            "strike", "industrial relations", "union wage premium"
        ],
        "weak_signals": []
    },

    "automation": {
        "name": "Automation & AI",
        "related": ["labor", "innovation", "skills"],
        "adjacent": ["wages", "inequality", "employment"],
        "strong_signals": [
            "automation", "robot", "robots", "artificial intelligence",
            "technological unemployment", "future of work",
            "task automation", "automated"
        ],
        "moderate_signals": [
            "routine tasks", "labor-replacing", "skill-biased",
            "routine-biased", "computerization", "digitalization"
        ],
        "weak_signals": []
    },

    # EDUCATION
    "education": {
        "name": "Education",
        "related": ["human_capital", "schools", "higher_ed"],
        "adjacent": ["mobility", "inequality", "labor", "child_development"],
        "strong_signals": [
            "education", "educational", "school choice", "academic achievement",
            "educational attainment", "education policy", "education reform",
            "education system", "educational outcomes"
        ],
        "moderate_signals": [
            "student achievement", "test score", "curriculum", "instruction",
            "school quality", "school funding", "class size"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "school", "requires": ["student", "teacher", "education", "achievement", "enrollment", "grade"]},
            {"term": "learning", "requires": ["student", "school", "education", "classroom", "academic"]}
        ]
    },

    "schools": {
        "name": "K-12 Education",
        "parent": "education",
        "related": ["education", "teachers", "achievement_gap"],
        "adjacent": ["inequality", "segregation", "local_government"],
        "strong_signals": [
            "k-12", "elementary school", "high school", "middle school",
            "public school", "charter school", "school district",
            "primary school", "secondary school"
        ],
        "moderate_signals": [
            "school accountability", "school voucher", "student performance",
            "school principal", "magnet school"
        ],
        "weak_signals": []
    },

    "higher_ed": {
        "name": "Higher Education",
        "parent": "education",
        "related": ["education", "human_capital", "student_debt"],
        "adjacent": ["labor", "mobility", "inequality"],
        "strong_signals": [
            "college", "university", "higher education", "undergraduate",
            "graduate education", "tuition", "student loan", "student debt",
            "college premium", "college enrollment", "selective college"
        ],
        "moderate_signals": [
            "enrollment", "campus", "degree completion",
            "community college", "for-profit college"
        ],
        "weak_signals": []
    },

    "teachers": {
        "name": "Teachers & Teaching",
        "parent": "schools",
        "related": ["schools", "education"],
        "adjacent": ["labor", "public_sector"],
        "strong_signals": [
            "teacher quality", "teacher effectiveness", "teacher labor market",
            "teacher evaluation", "teacher value-added", "teacher turnover",
            "teacher certification"
        ],
        "moderate_signals": [
            "teacher pay", "teacher supply", "teaching quality",
            "class size", "instructional quality"
        ],
        "weak_signals": []
    },

    "achievement_gap": {
        "name": "Achievement Gaps",
        "parent": "education",
        "related": ["education", "inequality", "race"],
        "adjacent": ["mobility", "poverty", "schools"],
        "strong_signals": [
            "achievement gap", "test score gap", "educational inequality",
            "racial achievement gap", "income achievement gap",
            "performance gap"
        ],
        "moderate_signals": ["gap in achievement", "disparities in education"],
        "weak_signals": []
    },

    "child_development": {
        "name": "Child Development",
        "related": ["education", "family", "health"],
        "adjacent": ["poverty", "inequality", "mobility"],
        "strong_signals": [
            "child development", "early childhood", "preschool",
            "head start", "kindergarten readiness", "childcare",
            "child care", "early intervention"
        ],
        "moderate_signals": [
            "child outcome", "developmental", "pre-kindergarten",
            "nursery", "child health"
        ],
        "weak_signals": []
    },

    # HEALTH
    "health": {
        "name": "Health Economics",
        "related": ["healthcare", "mortality", "health_behaviors"],
        "adjacent": ["poverty", "inequality", "labor", "aging"],
        "strong_signals": [
            "health economics", "health outcome", "health effect",
            "health expenditure", "health status", "morbidity",
            "public health", "health policy", "health care cost",
            "health disparities", "health inequality"
        ],
        "moderate_signals": [
            "hospital", "physician", "patient", "disease", "life expectancy",
            "medical", "chronic condition", "mental health",
            "health insurance", "drug", "pharmaceutical"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "health", "requires": ["outcome", "care", "insurance", "expenditure", "mortality", "disease", "hospital", "medical", "patient"]}
        ]
    },

    "healthcare": {
        "name": "Healthcare Systems & Insurance",
        "parent": "health",
        "related": ["health", "health_insurance"],
        "adjacent": ["poverty", "public_economics"],
        "strong_signals": [
            "healthcare system", "health care system", "health insurance",
            "medicare", "medicaid", "affordable care act", "obamacare",
            "uninsured", "universal health care", "single payer",
            "health insurance coverage"
        ],
        "moderate_signals": [
            "insurance coverage", "insurance market", "provider",
            "health plan", "hospital quality", "emergency department"
        ],
        "weak_signals": []
    },

    "mortality": {
        "name": "Mortality & Life Expectancy",
        "parent": "health",
        "related": ["health", "aging", "inequality"],
        "adjacent": ["poverty", "environment"],
        "strong_signals": [
            "mortality", "mortality rate", "life expectancy", "deaths of despair",
            "infant mortality", "child mortality", "excess mortality",
            "cause of death", "survival rate"
        ],
        "moderate_signals": ["death rate", "lifespan", "longevity", "premature death"],
        "weak_signals": []
    },

    # HOUSING & URBAN
    "housing": {
        "name": "Housing",
        "related": ["real_estate", "rental", "homeownership"],
        "adjacent": ["urban", "inequality", "mobility", "finance"],
        "strong_signals": [
            "housing market", "house price", "home price", "housing supply",
            "housing demand", "housing affordability", "housing policy",
            "rental market", "housing crisis"
        ],
        "moderate_signals": [
            "mortgage", "homeowner", "homeownership", "tenant", "landlord",
            "eviction", "homelessness", "rent control", "zoning",
            "housing voucher"
        ],
        "weak_signals": []
    },

    "urban": {
        "name": "Urban Economics",
        "related": ["housing", "cities", "transportation"],
        "adjacent": ["inequality", "environment", "crime", "segregation"],
        "strong_signals": [
            "urban economics", "agglomeration", "urban growth",
            "urban development", "urban planning", "land use regulation",
            "spatial equilibrium", "commuting zone"
        ],
        "moderate_signals": [
            "metropolitan area", "neighborhood", "zoning", "land use",
            "urban sprawl", "population density", "gentrification",
            "place-based policy"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "city", "requires": ["urban", "neighborhood", "agglomeration", "local", "zoning", "density", "metro"]}
        ]
    },

    "segregation": {
        "name": "Residential Segregation",
        "parent": "urban",
        "related": ["urban", "housing", "race"],
        "adjacent": ["inequality", "education", "mobility"],
        "strong_signals": [
            "segregation", "residential segregation", "neighborhood sorting",
            "racial segregation", "economic segregation"
        ],
        "moderate_signals": [
            "dissimilarity index", "exposure index", "isolation index",
            "neighborhood composition"
        ],
        "weak_signals": []
    },

    # FINANCE & MACRO
    "finance": {
        "name": "Finance & Banking",
        "related": ["banking", "credit", "household_finance"],
        "adjacent": ["business_cycles", "monetary_policy", "housing"],
        "strong_signals": [
            "financial market", "stock market", "financial crisis",
            "banking sector", "credit market", "asset pricing",
            "financial regulation", "financial intermediation",
            "financial inclusion", "financial literacy"
        ],
        "moderate_signals": [
            "banking", "credit", "loan", "investment portfolio",
            "interest rate", "bond market", "equity market",
            "financial institution", "capital market"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "bank", "requires": ["credit", "loan", "deposit", "lending", "financial", "banking", "monetary"]}
        ]
    },

    "monetary_policy": {
        "name": "Monetary Policy",
        "related": ["finance", "business_cycles", "inflation"],
        "adjacent": ["fiscal_policy", "banking"],
        "strong_signals": [
            "monetary policy", "central bank", "federal reserve",
            "interest rate policy", "quantitative easing",
            "inflation targeting", "forward guidance",
            "monetary transmission"
        ],
        "moderate_signals": [
            "policy rate", "zero lower bound", "money supply",
            "taylor rule", "unconventional monetary policy",
            "exchange rate policy"
        ],
        "weak_signals": []
    },

    "inflation": {
        "name": "Inflation & Prices",
        "related": ["monetary_policy", "business_cycles"],
        "adjacent": ["fiscal_policy", "wages"],
        "strong_signals": [
            "inflation", "price level", "deflation", "price stability",
            "consumer price index", "cpi", "price inflation",
            "inflationary", "disinflation"
        ],
        "moderate_signals": [
            "price dynamics", "price rigidity", "price setting",
            "expectations anchoring", "phillips curve"
        ],
        "weak_signals": []
    },

    "fiscal_policy": {
        "name": "Fiscal Policy",
        "related": ["taxation", "government_spending", "public_debt"],
        "adjacent": ["business_cycles", "redistribution"],
        "strong_signals": [
            "fiscal policy", "government spending", "fiscal stimulus",
            "austerity", "fiscal multiplier", "fiscal consolidation",
            "public debt", "government debt", "fiscal rule"
        ],
        "moderate_signals": [
            "budget deficit", "fiscal space", "debt sustainability",
            "sovereign debt", "fiscal adjustment"
        ],
        "weak_signals": []
    },

    "business_cycles": {
        "name": "Business Cycles & Recessions",
        "related": ["monetary_policy", "employment", "finance"],
        "adjacent": ["fiscal_policy", "labor"],
        "strong_signals": [
            "business cycle", "recession", "great recession", "economic crisis",
            "financial crisis", "macroeconomic fluctuation",
            "great depression"
        ],
        "moderate_signals": [
            "economic downturn", "recovery", "expansion", "contraction",
            "boom-bust", "gdp growth"
        ],
        "weak_signals": []
    },

    "growth": {
        "name": "Economic Growth",
        "related": ["productivity", "innovation", "development"],
        "adjacent": ["human_capital", "institutions", "trade"],
        "strong_signals": [
            "economic growth", "growth theory", "endogenous growth",
            "growth model", "long-run growth", "growth rate",
            "convergence", "divergence"
        ],
        "moderate_signals": [
            "gdp per capita", "growth accounting", "total factor productivity",
            "structural transformation", "development accounting",
            "sustained growth"
        ],
        "weak_signals": []
    },

    "productivity": {
        "name": "Productivity",
        "related": ["growth", "innovation", "firms"],
        "adjacent": ["labor", "industrial_organization"],
        "strong_signals": [
            "productivity", "total factor productivity", "tfp",
            "labor productivity", "productivity growth",
            "productivity dispersion", "productivity measurement"
        ],
        "moderate_signals": [
            "misallocation", "reallocation", "firm productivity",
            "plant-level productivity", "multifactor productivity"
        ],
        "weak_signals": []
    },

    # TAXATION & PUBLIC ECONOMICS
    "taxation": {
        "name": "Taxation",
        "related": ["public_economics", "redistribution", "fiscal_policy"],
        "adjacent": ["inequality", "labor", "corporate_governance", "compliance"],
        "strong_signals": [
            "taxation", "income tax", "tax rate", "tax policy", "tax reform",
            "tax evasion", "tax avoidance", "tax base", "tax revenue",
            "tax incidence", "corporate tax", "property tax",
            "value-added tax", "vat", "capital gains tax",
            "estate tax", "wealth tax", "carbon tax",
            "tax system", "tax compliance", "tax enforcement"
        ],
        "moderate_signals": [
            "marginal tax rate", "effective tax rate", "tax bracket",
            "progressive tax", "regressive tax", "tax burden",
            "taxable income", "tax elasticity", "laffer curve",
            "salt tax", "excise tax", "indirect tax"
        ],
        "weak_signals": ["tax"]
    },

    "public_economics": {
        "name": "Public Economics",
        "related": ["taxation", "government_spending", "public_goods"],
        "adjacent": ["political_economy", "welfare_programs"],
        "strong_signals": [
            "public economics", "public finance", "public good",
            "public provision", "public sector", "government revenue",
            "fiscal federalism", "intergovernmental"
        ],
        "moderate_signals": [
            "government intervention", "public expenditure",
            "state and local government", "municipal"
        ],
        "weak_signals": []
    },

    "regulation": {
        "name": "Regulation",
        "related": ["public_economics", "industrial_organization"],
        "adjacent": ["energy", "finance", "environment", "labor"],
        "strong_signals": [
            "regulation", "regulatory", "deregulation", "regulatory reform",
            "regulatory burden", "occupational licensing", "licensing requirement"
        ],
        "moderate_signals": [
            "compliance cost", "regulatory impact", "permitting",
            "entry barrier", "red tape"
        ],
        "weak_signals": []
    },

    # TRADE & INTERNATIONAL
    "trade": {
        "name": "International Trade",
        "related": ["globalization", "tariffs", "offshoring"],
        "adjacent": ["labor", "inequality", "development", "industrial_organization"],
        "strong_signals": [
            "international trade", "trade policy", "trade agreement",
            "trade liberalization", "free trade", "trade barrier",
            "trade deficit", "trade surplus", "trade flow",
            "gravity model", "comparative advantage"
        ],
        "moderate_signals": [
            "tariff", "import", "export", "protectionism", "wto",
            "trade war", "trade shock", "terms of trade",
            "trade integration", "customs"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "trade", "requires": ["international", "tariff", "import", "export", "bilateral", "agreement", "liberalization", "barrier", "goods", "services"]}
        ]
    },

    "globalization": {
        "name": "Globalization",
        "parent": "trade",
        "related": ["trade", "offshoring", "immigration"],
        "adjacent": ["labor", "inequality"],
        "strong_signals": [
            "globalization", "globalisation", "china shock",
            "global value chain", "supply chain", "global supply chain",
            "offshoring", "outsourcing"
        ],
        "moderate_signals": [
            "multinational", "foreign direct investment", "fdi",
            "global integration", "trade openness"
        ],
        "weak_signals": []
    },

    # DEVELOPMENT
    "development": {
        "name": "Development Economics",
        "related": ["poverty", "growth", "aid", "institutions"],
        "adjacent": ["health", "education", "conflict", "agriculture"],
        "strong_signals": [
            "development economics", "developing country", "developing world",
            "economic development", "global south", "low-income country",
            "developing economies", "development policy"
        ],
        "moderate_signals": [
            "sub-saharan africa", "south asia", "southeast asia",
            "ldc", "least developed", "emerging economy",
            "world bank", "international development"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "development", "requires": ["country", "poverty", "aid", "africa", "asia", "latin america", "rural", "village", "household survey"]}
        ]
    },

    "aid": {
        "name": "Foreign Aid",
        "parent": "development",
        "related": ["development", "international_relations"],
        "adjacent": ["poverty", "institutions"],
        "strong_signals": [
            "foreign aid", "development aid", "official development assistance",
            "oda", "international aid", "aid effectiveness"
        ],
        "moderate_signals": ["donor", "recipient country", "aid allocation"],
        "weak_signals": []
    },

    "microfinance": {
        "name": "Microfinance",
        "parent": "development",
        "related": ["development", "finance", "poverty"],
        "adjacent": ["credit", "entrepreneurship"],
        "strong_signals": [
            "microfinance", "microcredit", "microinsurance", "grameen",
            "microfinance institution"
        ],
        "moderate_signals": ["small loans", "village banking"],
        "weak_signals": []
    },

    "agriculture": {
        "name": "Agriculture",
        "related": ["development", "environment", "trade"],
        "adjacent": ["poverty", "climate_change", "land"],
        "strong_signals": [
            "agriculture", "agricultural", "farming", "farmer", "crop",
            "agricultural policy", "food production", "agricultural productivity",
            "farm", "livestock"
        ],
        "moderate_signals": [
            "harvest", "irrigation", "fertilizer", "seed",
            "agricultural extension", "food price"
        ],
        "weak_signals": []
    },

    "land": {
        "name": "Land & Property Rights",
        "related": ["agriculture", "development", "institutions"],
        "adjacent": ["housing", "inequality", "growth"],
        "strong_signals": [
            "land reform", "land rights", "property rights", "land tenure",
            "land titling", "land redistribution", "land ownership",
            "common property"
        ],
        "moderate_signals": [
            "land market", "expropriation", "eminent domain",
            "customary tenure", "communal land"
        ],
        "weak_signals": []
    },

    "colonial_legacy": {
        "name": "Colonial Legacy & Persistence",
        "related": ["development", "institutions", "economic_history"],
        "adjacent": ["inequality", "conflict", "growth"],
        "strong_signals": [
            "colonial", "colonialism", "colonial legacy", "post-colonial",
            "colonial institutions", "historical persistence",
            "long-run effects", "persistence"
        ],
        "moderate_signals": [
            "settler mortality", "extractive institutions",
            "missionary", "slave trade", "colonial rule"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "persistence", "requires": ["historical", "colonial", "long-run", "centuries", "institutional"]}
        ]
    },

    # CLIMATE & ENVIRONMENT
    "environment": {
        "name": "Environment & Climate",
        "related": ["climate_change", "pollution", "energy"],
        "adjacent": ["health", "development", "policy", "agriculture"],
        "strong_signals": [
            "environmental economics", "environmental policy",
            "environmental regulation", "pollution", "emissions",
            "carbon emissions", "air quality", "water quality",
            "environmental damage", "environmental impact"
        ],
        "moderate_signals": [
            "greenhouse gas", "sustainability", "ecological",
            "biodiversity", "deforestation", "conservation"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "environment", "requires": ["pollution", "emission", "climate", "regulation", "environmental", "carbon", "green", "sustainability"]}
        ]
    },

    "climate_change": {
        "name": "Climate Change",
        "parent": "environment",
        "related": ["environment", "energy", "policy"],
        "adjacent": ["development", "agriculture", "natural_disasters"],
        "strong_signals": [
            "climate change", "global warming", "carbon emissions",
            "greenhouse gas emissions", "climate policy", "climate adaptation",
            "climate mitigation", "paris agreement", "carbon tax",
            "emission trading", "cap and trade"
        ],
        "moderate_signals": [
            "climate risk", "temperature increase", "sea level rise",
            "climate damage", "climate model", "net zero"
        ],
        "weak_signals": []
    },

    "energy": {
        "name": "Energy Economics",
        "parent": "environment",
        "related": ["environment", "climate_change"],
        "adjacent": ["industrial_organization", "regulation"],
        "strong_signals": [
            "energy economics", "energy market", "energy policy",
            "electricity market", "renewable energy", "fossil fuel",
            "solar energy", "wind energy", "energy transition",
            "energy efficiency"
        ],
        "moderate_signals": [
            "power plant", "electricity price", "oil price",
            "natural gas", "energy consumption", "energy subsidy"
        ],
        "weak_signals": []
    },

    "natural_disasters": {
        "name": "Natural Disasters",
        "related": ["climate_change", "development"],
        "adjacent": ["health", "insurance", "poverty"],
        "strong_signals": [
            "natural disaster", "earthquake", "hurricane", "flood",
            "drought", "tsunami", "disaster relief", "disaster risk",
            "extreme weather", "weather shock"
        ],
        "moderate_signals": [
            "catastrophe", "disaster recovery", "climate shock",
            "storm", "wildfire", "famine"
        ],
        "weak_signals": []
    },

    # INNOVATION & TECHNOLOGY
    "innovation": {
        "name": "Innovation & Technology",
        "related": ["patents", "entrepreneurship", "productivity"],
        "adjacent": ["labor", "industrial_organization", "growth", "automation"],
        "strong_signals": [
            "innovation", "technological change", "patent", "patents",
            "r&d", "research and development", "technology adoption",
            "invention", "innovative", "creative destruction"
        ],
        "moderate_signals": [
            "intellectual property", "knowledge spillover",
            "technology transfer", "tech sector", "startup ecosystem"
        ],
        "weak_signals": []
    },

    "entrepreneurship": {
        "name": "Entrepreneurship",
        "parent": "innovation",
        "related": ["innovation", "firm_dynamics"],
        "adjacent": ["labor", "finance"],
        "strong_signals": [
            "entrepreneurship", "startup", "entrepreneur",
            "small business", "self-employment", "new venture",
            "business creation", "founding"
        ],
        "moderate_signals": [
            "venture capital", "angel investor", "seed funding",
            "business incubator", "startup ecosystem"
        ],
        "weak_signals": []
    },

    # DEMOGRAPHICS & FAMILY
    "gender": {
        "name": "Gender Economics",
        "related": ["family", "labor", "discrimination"],
        "adjacent": ["wages", "education", "politics"],
        "strong_signals": [
            "gender gap", "gender inequality", "gender discrimination",
            "gender wage gap", "gender economics", "women in the labor",
            "female labor force", "gender norms", "gender roles",
            "women empowerment", "gender parity"
        ],
        "moderate_signals": [
            "motherhood penalty", "fatherhood", "gender difference",
            "glass ceiling", "gender bias", "sexual harassment",
            "women in politics"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "gender", "requires": ["gap", "inequality", "discrimination", "wage", "labor", "norm", "role", "difference", "parity", "bias"]},
            {"term": "women", "requires": ["labor", "wage", "work", "employment", "education", "empowerment", "representation", "participation"]}
        ]
    },

    "family": {
        "name": "Family Economics",
        "related": ["gender", "fertility", "marriage"],
        "adjacent": ["labor", "education", "child_development"],
        "strong_signals": [
            "family economics", "household economics", "marriage market",
            "divorce", "fertility", "birth rate", "fertility rate",
            "family structure", "household formation",
            "intrahousehold", "intra-household"
        ],
        "moderate_signals": [
            "childbearing", "maternity leave", "paternity leave",
            "parental leave", "marital status", "cohabitation",
            "household bargaining", "family size"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "family", "requires": ["marriage", "fertility", "child", "household", "divorce", "parent", "spouse"]}
        ]
    },

    "immigration": {
        "name": "Immigration & Migration",
        "related": ["migration", "labor"],
        "adjacent": ["wages", "public_opinion", "policy", "cultural"],
        "strong_signals": [
            "immigration", "immigrant", "immigration policy",
            "foreign-born", "native-born", "immigration reform",
            "migrant", "migration", "emigration",
            "internal migration", "international migration"
        ],
        "moderate_signals": [
            "refugee", "asylum", "visa", "undocumented",
            "naturalization", "deportation", "immigration enforcement",
            "brain drain", "remittance"
        ],
        "weak_signals": []
    },

    "race": {
        "name": "Race & Ethnicity",
        "related": ["discrimination", "inequality"],
        "adjacent": ["segregation", "education", "crime", "politics"],
        "strong_signals": [
            "racial inequality", "racial discrimination", "racial gap",
            "race and ethnicity", "racial justice", "racial disparities",
            "ethnic conflict", "ethnic politics", "ethnic diversity",
            "african american", "racial segregation"
        ],
        "moderate_signals": [
            "minority group", "racial bias", "interethnic",
            "racial wealth gap", "racial profiling", "hate crime",
            "ethnic group", "ethno-linguistic"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "race", "requires": ["racial", "discrimination", "inequality", "gap", "ethnic", "minority", "segregation", "bias"]}
        ]
    },

    "discrimination": {
        "name": "Discrimination",
        "related": ["race", "gender", "inequality"],
        "adjacent": ["labor", "housing", "crime"],
        "strong_signals": [
            "discrimination", "discriminatory", "audit study",
            "correspondence study", "hiring discrimination",
            "taste-based discrimination", "statistical discrimination",
            "implicit bias"
        ],
        "moderate_signals": [
            "prejudice", "stereotype", "racial profiling",
            "disparate impact", "equal opportunity"
        ],
        "weak_signals": []
    },

    "aging": {
        "name": "Aging & Retirement",
        "related": ["health", "pensions", "labor"],
        "adjacent": ["family", "public_economics"],
        "strong_signals": [
            "aging", "retirement", "pension", "social security",
            "older workers", "aging population", "retirement savings",
            "pension reform"
        ],
        "moderate_signals": [
            "retiree", "elderly", "old age", "senior",
            "retirement age", "life cycle"
        ],
        "weak_signals": []
    },

    # CRIME & JUSTICE
    "crime": {
        "name": "Crime & Criminal Justice",
        "related": ["policing", "incarceration"],
        "adjacent": ["poverty", "race", "policy"],
        "strong_signals": [
            "crime", "criminal justice", "criminal behavior",
            "crime rate", "property crime", "violent crime",
            "criminal", "criminal activity"
        ],
        "moderate_signals": [
            "arrest", "conviction", "sentencing", "recidivism",
            "homicide", "robbery", "burglary", "assault",
            "gun violence", "deterrence"
        ],
        "weak_signals": []
    },

    "policing": {
        "name": "Policing",
        "parent": "crime",
        "related": ["crime", "race"],
        "adjacent": ["public_economics", "policy"],
        "strong_signals": [
            "policing", "police force", "law enforcement",
            "police officer", "police reform", "police violence",
            "use of force"
        ],
        "moderate_signals": [
            "patrol", "stop and frisk", "body camera",
            "police department", "police shooting"
        ],
        "weak_signals": []
    },

    "incarceration": {
        "name": "Incarceration",
        "parent": "crime",
        "related": ["crime", "labor"],
        "adjacent": ["poverty", "race", "family"],
        "strong_signals": [
            "incarceration", "prison", "imprisonment", "mass incarceration",
            "jail", "correctional"
        ],
        "moderate_signals": ["inmate", "sentence", "parole", "probation"],
        "weak_signals": []
    },

    # POLITICAL SCIENCE
    "elections": {
        "name": "Elections & Voting",
        "related": ["voting_behavior", "campaigns", "political_participation"],
        "adjacent": ["political_economy", "public_opinion", "media", "democracy"],
        "strong_signals": [
            "election", "electoral", "ballot", "voter turnout",
            "vote share", "voting behavior", "election results",
            "general election", "midterm election", "primary election",
            "electoral system", "proportional representation",
            "gerrymandering", "redistricting"
        ],
        "moderate_signals": [
            "candidate", "campaign", "voter registration",
            "incumbent", "reelection", "swing state",
            "political party", "partisan", "polling"
        ],
        "weak_signals": ["vote"]
    },

    "democracy": {
        "name": "Democracy & Democratization",
        "related": ["institutions", "authoritarianism", "political_development"],
        "adjacent": ["elections", "accountability", "civil_liberties"],
        "strong_signals": [
            "democracy", "democratization", "democratic transition",
            "democratic institution", "democratic governance",
            "democratic backsliding", "polity score"
        ],
        "moderate_signals": [
            "political freedom", "civil liberties", "political rights",
            "democratic consolidation", "electoral democracy",
            "liberal democracy"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "regime", "requires": ["democratic", "authoritarian", "political", "transition", "change", "type", "stability"]}
        ]
    },

    "authoritarianism": {
        "name": "Authoritarianism",
        "related": ["democracy", "repression", "institutions"],
        "adjacent": ["conflict", "political_economy"],
        "strong_signals": [
            "authoritarian", "autocracy", "dictatorship", "authoritarian regime",
            "one-party state", "political repression",
            "authoritarian governance"
        ],
        "moderate_signals": [
            "censorship", "political control", "opposition repression",
            "strongman", "regime survival"
        ],
        "weak_signals": []
    },

    "polarization": {
        "name": "Political Polarization",
        "related": ["elections", "public_opinion", "media"],
        "adjacent": ["democracy", "social_media", "political_economy"],
        "strong_signals": [
            "political polarization", "partisan polarization",
            "affective polarization", "ideological polarization",
            "polarized", "bipartisan"
        ],
        "moderate_signals": [
            "partisan divide", "cross-party", "tribalism",
            "echo chamber", "filter bubble", "political divide"
        ],
        "weak_signals": []
    },

    "conflict": {
        "name": "Conflict & Security",
        "related": ["civil_war", "international_security", "violence"],
        "adjacent": ["development", "institutions", "international_relations"],
        "strong_signals": [
            "civil war", "armed conflict", "military conflict",
            "warfare", "political violence", "insurgency",
            "peacekeeping", "post-conflict", "conflict resolution"
        ],
        "moderate_signals": [
            "battle", "casualty", "rebellion", "terrorism",
            "guerrilla", "ceasefire", "ethnic violence",
            "genocide", "mass atrocity"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "conflict", "requires": ["armed", "civil", "violent", "military", "war", "peace", "ethnic", "political"]},
            {"term": "war", "requires": ["civil", "world", "armed", "military", "conflict", "postwar", "wartime"]}
        ]
    },

    "accountability": {
        "name": "Accountability & Transparency",
        "related": ["corruption", "institutions", "governance"],
        "adjacent": ["democracy", "elections", "media"],
        "strong_signals": [
            "accountability", "government transparency", "oversight",
            "government audit", "freedom of information",
            "public disclosure", "political accountability"
        ],
        "moderate_signals": [
            "monitoring", "watchdog", "checks and balances",
            "open government", "anti-corruption"
        ],
        "weak_signals": []
    },

    "corruption": {
        "name": "Corruption",
        "related": ["accountability", "institutions", "governance"],
        "adjacent": ["development", "political_economy", "crime"],
        "strong_signals": [
            "corruption", "bribery", "embezzlement", "graft",
            "anti-corruption", "kleptocracy", "corrupt"
        ],
        "moderate_signals": [
            "rent-seeking", "clientelism", "patronage", "nepotism",
            "malfeasance", "misappropriation", "kickback"
        ],
        "weak_signals": []
    },

    "institutions": {
        "name": "Political Institutions",
        "related": ["democracy", "governance", "legislature"],
        "adjacent": ["political_economy", "development", "colonial_legacy"],
        "strong_signals": [
            "political institution", "institutional design",
            "constitutional", "legislature", "parliament",
            "congressional", "judicial independence", "separation of powers",
            "institutional quality", "institutional change"
        ],
        "moderate_signals": [
            "bureaucracy", "state capacity", "federalism",
            "decentralization", "executive power", "veto player",
            "bicameral", "state formation"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "institution", "requires": ["political", "democratic", "colonial", "state", "governance", "constitutional", "reform", "quality", "building"]}
        ]
    },

    "state_capacity": {
        "name": "State Capacity",
        "parent": "institutions",
        "related": ["institutions", "development", "taxation"],
        "adjacent": ["conflict", "colonial_legacy", "public_economics"],
        "strong_signals": [
            "state capacity", "state building", "state formation",
            "fiscal capacity", "administrative capacity",
            "bureaucratic quality", "government effectiveness"
        ],
        "moderate_signals": [
            "state weakness", "failed state", "fragile state",
            "governance quality", "civil service"
        ],
        "weak_signals": []
    },

    "public_opinion": {
        "name": "Public Opinion",
        "related": ["political_behavior", "media", "elections", "polarization"],
        "adjacent": ["policy", "democracy"],
        "strong_signals": [
            "public opinion", "opinion poll", "public attitudes",
            "policy preferences", "mass opinion", "political attitudes",
            "public support"
        ],
        "moderate_signals": [
            "survey data", "attitudinal", "political preferences",
            "public sentiment", "approval rating"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "survey", "requires": ["opinion", "attitude", "preference", "respondent", "nationally representative", "polling"]}
        ]
    },

    "international_relations": {
        "name": "International Relations",
        "related": ["conflict", "diplomacy", "international_cooperation"],
        "adjacent": ["trade", "security"],
        "strong_signals": [
            "international relations", "foreign policy", "diplomacy",
            "bilateral relations", "multilateral cooperation",
            "international cooperation", "geopolitics",
            "international organization", "sanctions"
        ],
        "moderate_signals": [
            "alliance", "treaty", "united nations", "nato",
            "international law", "soft power", "economic sanctions"
        ],
        "weak_signals": []
    },

    "political_economy": {
        "name": "Political Economy",
        "related": ["institutions", "redistribution", "policy", "taxation"],
        "adjacent": ["inequality", "development", "democracy"],
        "strong_signals": [
            "political economy", "political economics",
            "political constraints", "political competition",
            "political incentive", "political determinants"
        ],
        "moderate_signals": [
            "vested interest", "lobby", "lobbying", "interest group",
            "political influence", "revolving door", "regulatory capture",
            "political connection", "political cycle"
        ],
        "weak_signals": []
    },

    # INFORMATION & MEDIA
    "media": {
        "name": "Media & News",
        "related": ["news_media", "social_media", "information"],
        "adjacent": ["public_opinion", "elections", "democracy", "polarization"],
        "strong_signals": [
            "news media", "media bias", "media effect", "newspaper",
            "journalism", "media coverage", "media market",
            "media influence", "press freedom", "media consumption",
            "broadcast media", "television news"
        ],
        "moderate_signals": [
            "news coverage", "media outlet", "journalist",
            "editorial", "media ownership", "media slant"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "media", "requires": ["news", "journalist", "coverage", "outlet", "bias", "broadcast", "television", "radio", "consumption", "freedom"]},
            {"term": "press", "requires": ["freedom", "media", "news", "journalist", "newspaper"]}
        ]
    },

    "social_media": {
        "name": "Social Media & Digital Platforms",
        "parent": "media",
        "related": ["media", "information", "technology"],
        "adjacent": ["public_opinion", "elections", "misinformation", "polarization"],
        "strong_signals": [
            "social media", "facebook", "twitter", "instagram", "tiktok",
            "youtube", "online platform", "digital platform",
            "social media platform"
        ],
        "moderate_signals": [
            "viral", "online content", "user-generated content",
            "platform regulation", "content moderation"
        ],
        "weak_signals": []
    },

    "misinformation": {
        "name": "Misinformation",
        "parent": "media",
        "related": ["media", "social_media", "public_opinion"],
        "adjacent": ["elections", "health", "democracy"],
        "strong_signals": [
            "misinformation", "disinformation", "fake news", "fact-check",
            "false information", "information disorder",
            "conspiracy theory"
        ],
        "moderate_signals": [
            "propaganda", "misleading information", "debunking",
            "media literacy"
        ],
        "weak_signals": []
    },

    # SOCIAL PHENOMENA
    "social_networks": {
        "name": "Social Networks & Peer Effects",
        "related": ["peer_effects", "social_capital", "information"],
        "adjacent": ["labor", "education", "crime"],
        "strong_signals": [
            "social network", "peer effect", "peer effects",
            "network formation", "network structure",
            "peer influence", "social influence", "social contagion"
        ],
        "moderate_signals": [
            "friendship network", "social tie", "social connection",
            "network centrality", "network position", "spillover effect"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "network", "requires": ["peer", "social", "friendship", "tie", "connection", "centrality", "formation"]}
        ]
    },

    "peer_effects": {
        "name": "Peer Effects",
        "parent": "social_networks",
        "related": ["social_networks", "education", "labor"],
        "adjacent": ["crime", "health"],
        "strong_signals": [
            "peer effect", "peer effects", "peer influence",
            "peer group", "neighborhood effect"
        ],
        "moderate_signals": [
            "social multiplier", "reflection problem",
            "endogenous peer effect", "contextual effect"
        ],
        "weak_signals": []
    },

    "social_capital": {
        "name": "Social Capital & Trust",
        "related": ["social_networks", "institutions", "norms"],
        "adjacent": ["development", "democracy", "crime"],
        "strong_signals": [
            "social capital", "social trust", "civic participation",
            "social cohesion", "generalized trust",
            "interpersonal trust"
        ],
        "moderate_signals": [
            "civic engagement", "community organization",
            "voluntary association", "trust game"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "trust", "requires": ["social", "civic", "generalized", "interpersonal", "institutional", "political", "community"]}
        ]
    },

    "norms": {
        "name": "Norms & Culture",
        "related": ["social_capital", "institutions"],
        "adjacent": ["development", "gender", "behavioral"],
        "strong_signals": [
            "social norm", "cultural norm", "cultural values",
            "cultural economics", "cultural change", "social norms"
        ],
        "moderate_signals": [
            "tradition", "custom", "cultural trait", "socialization",
            "cultural persistence", "value change"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "culture", "requires": ["norm", "value", "tradition", "belief", "identity", "persistence", "cultural"]},
            {"term": "norm", "requires": ["social", "cultural", "gender", "enforcement", "compliance", "informal"]}
        ]
    },

    "religion": {
        "name": "Religion",
        "related": ["norms", "identity"],
        "adjacent": ["politics", "conflict", "development"],
        "strong_signals": [
            "religion", "religious", "church", "mosque",
            "secularization", "religious institution",
            "religious belief", "religiosity"
        ],
        "moderate_signals": [
            "faith", "clergy", "religious freedom",
            "religious conflict", "missionary"
        ],
        "weak_signals": []
    },

    # BEHAVIORAL / PSYCHOLOGY
    "behavioral": {
        "name": "Behavioral Economics",
        "related": ["nudges", "biases", "decision_making"],
        "adjacent": ["policy", "psychology", "health"],
        "strong_signals": [
            "behavioral economics", "nudge", "choice architecture",
            "bounded rationality", "behavioral intervention",
            "behavioral insight", "behavioral science"
        ],
        "moderate_signals": [
            "heuristic", "framing effect", "default option",
            "present bias", "time inconsistency", "reference point",
            "loss aversion", "prospect theory"
        ],
        "weak_signals": []
    },

    "biases": {
        "name": "Cognitive Biases",
        "parent": "behavioral",
        "related": ["behavioral", "decision_making"],
        "adjacent": ["psychology", "finance"],
        "strong_signals": [
            "cognitive bias", "overconfidence", "anchoring effect",
            "loss aversion", "present bias", "confirmation bias",
            "availability heuristic", "representativeness heuristic"
        ],
        "moderate_signals": [
            "heuristic", "systematic error", "cognitive limitation",
            "status quo bias"
        ],
        "weak_signals": []
    },

    "nudges": {
        "name": "Nudges & Choice Architecture",
        "parent": "behavioral",
        "related": ["behavioral", "policy"],
        "adjacent": ["health", "savings"],
        "strong_signals": [
            "nudge", "nudging", "choice architecture",
            "libertarian paternalism", "default effect",
            "behavioral policy"
        ],
        "moderate_signals": [
            "opt-in", "opt-out", "behavioral intervention",
            "automatic enrollment"
        ],
        "weak_signals": []
    },

    "decision_making": {
        "name": "Decision Making",
        "related": ["behavioral", "risk"],
        "adjacent": ["psychology", "organizations"],
        "strong_signals": [
            "decision making", "decision-making", "judgment under uncertainty",
            "choice under uncertainty", "decision theory"
        ],
        "moderate_signals": [
            "cognitive process", "deliberation", "attention allocation",
            "information processing"
        ],
        "weak_signals": []
    },

    "risk": {
        "name": "Risk & Uncertainty",
        "related": ["decision_making", "insurance", "finance"],
        "adjacent": ["behavioral", "health"],
        "strong_signals": [
            "risk aversion", "risk preference", "risk management",
            "expected utility", "uncertainty", "risk taking",
            "ambiguity aversion"
        ],
        "moderate_signals": [
            "probability weighting", "insurance demand",
            "precautionary saving"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "risk", "requires": ["aversion", "preference", "uncertainty", "insurance", "manage", "taking", "appetite", "tolerance"]}
        ]
    },

    # ORGANIZATIONS & IO
    "organizations": {
        "name": "Organizations & Firms",
        "related": ["corporate_governance", "management", "firms"],
        "adjacent": ["labor", "industrial_organization"],
        "strong_signals": [
            "organizational behavior", "organizational structure",
            "firm organization", "management practice",
            "firm performance", "corporate culture"
        ],
        "moderate_signals": [
            "organizational change", "firm dynamics",
            "employer-employee", "enterprise"
        ],
        "weak_signals": [],
        "contextual_signals": [
            {"term": "firm", "requires": ["productivity", "performance", "size", "entry", "exit", "dynamics", "manager", "employer"]}
        ]
    },

    "corporate_governance": {
        "name": "Corporate Governance",
        "parent": "organizations",
        "related": ["organizations", "executive_comp", "finance"],
        "adjacent": ["inequality", "management"],
        "strong_signals": [
            "corporate governance", "board of directors", "shareholder activism",
            "executive compensation", "ceo pay", "agency problem",
            "corporate board"
        ],
        "moderate_signals": [
            "ownership structure", "fiduciary duty", "proxy",
            "institutional investor", "corporate control"
        ],
        "weak_signals": []
    },

    "industrial_organization": {
        "name": "Industrial Organization",
        "related": ["competition", "regulation", "organizations"],
        "adjacent": ["antitrust", "innovation", "trade"],
        "strong_signals": [
            "industrial organization", "market structure", "market power",
            "antitrust", "merger", "market concentration",
            "competition policy", "market definition"
        ],
        "moderate_signals": [
            "oligopoly", "monopoly", "entry barrier",
            "horizontal merger", "vertical integration",
            "price discrimination", "herfindahl"
        ],
        "weak_signals": []
    },

    "market_design": {
        "name": "Market Design & Matching",
        "related": ["game_theory", "industrial_organization"],
        "adjacent": ["education", "health", "labor"],
        "strong_signals": [
            "market design", "matching market", "mechanism design",
            "school choice mechanism", "deferred acceptance",
            "auction design", "matching algorithm"
        ],
        "moderate_signals": [
            "stable matching", "kidney exchange", "assignment mechanism",
            "allocation mechanism", "top trading cycle"
        ],
        "weak_signals": []
    },

    # ECONOMIC HISTORY
    "economic_history": {
        "name": "Economic History",
        "related": ["colonial_legacy", "growth", "institutions"],
        "adjacent": ["development", "political_economy", "trade"],
        "strong_signals": [
            "economic history", "historical economics",
            "historical evidence", "historical data",
            "nineteenth century", "eighteenth century",
            "interwar", "postwar period", "historical development"
        ],
        "moderate_signals": [
            "historical", "archival data", "historical records",
            "long-run", "centuries", "preindustrial",
            "industrial revolution"
        ],
        "weak_signals": []
    }
}
