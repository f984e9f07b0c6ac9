"""Method lexicon table.

Each entry describes one research method: graph edges (parent, siblings,
implies, implied_by) and tiered detection phrases. Strong signals are
multi-word or technical phrases that are confident on their own, moderate
signals need corroboration, weak signals never trigger alone, and negative
signals demote a detection.

Loaded once into frozen ``MethodNode`` objects by ``taxonomy.graph``.
"""

METHOD_DATA: dict[str, dict] = {
    # CAUSAL INFERENCE (meta)
    "causal_inference": {
        "name": "Causal Inference",
        "strong_signals": [
            "causal effect", "causal inference", "causal identification",
            "identification strategy", "causal impact", "causal estimate",
            "causal relationship"
        ],
        "moderate_signals": [
            "treatment effect", "counterfactual", "endogeneity", "selection bias",
            "omitted variable", "unobserved heterogeneity", "exogenous variation",
            "average treatment effect", "local average treatment effect"
        ],
        "weak_signals": [],
        "implies": [
            "diff_in_diff", "regression_discontinuity", "instrumental_variables",
            "rct", "synthetic_control", "event_studies", "matching"
        ]
    },

    # EXPERIMENTAL
    "rct": {
        "name": "Randomized Experiments",
        "parent": "causal_inference",
        "siblings": ["field_experiment", "lab_experiment", "survey_experiment"],
        "strong_signals": [
            "randomized controlled trial", "randomized experiment",
            "random assignment", "randomization", "randomised controlled trial",
            "randomised experiment", "randomly assigned"
        ],
        "moderate_signals": [
            "field experiment", "lab experiment", "treatment group",
            "control group", "experimental design", "experimental evidence",
            "experimental arm"
        ],
        "weak_signals": ["treatment", "treated"],
        "implied_by": ["causal_inference"],
        "implies": ["causal_inference"]
    },

    "field_experiment": {
        "name": "Field Experiments",
        "parent": "rct",
        "strong_signals": ["field experiment", "field trial", "natural field experiment"],
        "moderate_signals": ["real-world experiment", "in the field"],
        "weak_signals": [],
        "implied_by": ["rct"],
        "implies": ["rct", "causal_inference"]
    },

    "survey_experiment": {
        "name": "Survey Experiments",
        "parent": "rct",
        "strong_signals": [
            "survey experiment", "conjoint experiment", "conjoint analysis",
            "vignette experiment", "list experiment", "endorsement experiment",
            "factorial experiment"
        ],
        "moderate_signals": ["experimental survey", "conjoint"],
        "weak_signals": [],
        "implied_by": ["rct"],
        "implies": ["rct"]
    },

    # QUASI-EXPERIMENTAL
    "diff_in_diff": {
        "name": "Difference-in-Differences",
        "parent": "causal_inference",
        "siblings": ["event_studies", "synthetic_control"],
        "strong_signals": [
            "difference-in-differences", "diff-in-diff", "difference in differences",
            "differences-in-differences", "triple difference", "triple differences",
            "did design", "did estimation", "did approach", "did estimator"
        ],
        "moderate_signals": [
            "parallel trends", "pre-trends", "two-way fixed effects", "twfe",
            "staggered adoption", "staggered treatment", "staggered rollout",
            "callaway and sant'anna", "de chaisemartin", "sun and abraham",
            "goodman-bacon", "borusyak"
        ],
        "weak_signals": ["before and after"],
        "negative_signals": ["discontinuity", "cutoff", "threshold", "running variable"],
        "implied_by": ["causal_inference"],
        "implies": ["causal_inference", "panel_data"]
    },

    "regression_discontinuity": {
        "name": "Regression Discontinuity",
        "parent": "causal_inference",
        "strong_signals": [
            "regression discontinuity", "regression-discontinuity",
            "rd design", "rdd", "discontinuity design",
            "sharp rd", "fuzzy rd", "sharp regression discontinuity",
            "fuzzy regression discontinuity", "geographic rd",
            "spatial regression discontinuity", "rd estimate"
        ],
        "moderate_signals": [
            "running variable", "forcing variable", "cutoff",
            "bandwidth selection", "local polynomial", "discontinuity at the",
            "mccrary test", "manipulation test", "donut rd"
        ],
        "weak_signals": ["just above", "just below"],
        "negative_signals": ["difference-in-differences", "parallel trends"],
        "implied_by": ["causal_inference"],
        "implies": ["causal_inference"]
    },

    "instrumental_variables": {
        "name": "Instrumental Variables",
        "parent": "causal_inference",
        "strong_signals": [
            "instrumental variable", "instrumental variables",
            "two-stage least squares", "2sls", "tsls",
            "iv estimation", "iv approach", "iv strategy", "iv regression"
        ],
        "moderate_signals": [
            "exclusion restriction", "first stage", "first-stage",
            "weak instrument", "instrument relevance", "overidentification",
            "local average treatment effect", "late", "complier",
            "bartik instrument", "shift-share", "judges as instruments"
        ],
        "weak_signals": ["exogenous variation", "source of variation"],
        "implied_by": ["causal_inference"],
        "implies": ["causal_inference"]
    },

    "synthetic_control": {
        "name": "Synthetic Control",
        "parent": "causal_inference",
        "siblings": ["diff_in_diff"],
        "strong_signals": [
            "synthetic control", "synthetic control method",
            "synthetic counterfactual", "augmented synthetic control",
            "synthetic diff-in-diff"
        ],
        "moderate_signals": ["donor pool", "comparative case study method"],
        "weak_signals": [],
        "implied_by": ["causal_inference"],
        "implies": ["causal_inference"]
    },

    "event_studies": {
        "name": "Event Studies",
        "parent": "causal_inference",
        "siblings": ["diff_in_diff"],
        "strong_signals": [
            "event study", "event-study", "event study design",
            "dynamic treatment effects", "dynamic effects"
        ],
        "moderate_signals": [
            "leads and lags", "pre-period", "post-period", "event window",
            "event time", "relative time"
        ],
        "weak_signals": [],
        "implied_by": ["causal_inference", "diff_in_diff"],
        "implies": ["causal_inference"]
    },

    "bunching": {
        "name": "Bunching Estimation",
        "parent": "causal_inference",
        "strong_signals": [
            "bunching", "bunching estimation", "bunching estimator",
            "excess mass", "missing mass", "bunching design"
        ],
        "moderate_signals": ["kink point", "notch", "bunching at"],
        "weak_signals": [],
        "implied_by": ["causal_inference"],
        "implies": ["causal_inference"]
    },

    "matching": {
        "name": "Matching Methods",
        "parent": "causal_inference",
        "strong_signals": [
            "propensity score matching", "matching estimator",
            "coarsened exact matching", "nearest neighbor matching",
            "matched sample", "matching on observables"
        ],
        "moderate_signals": [
            "propensity score", "selection on observables",
            "inverse probability weighting", "ipw", "doubly robust"
        ],
        "weak_signals": [],
        "implied_by": ["causal_inference"],
        "implies": ["causal_inference"]
    },

    # STRUCTURAL
    "structural_estimation": {
        "name": "Structural Estimation",
        "strong_signals": [
            "structural estimation", "structural model", "structural approach",
            "estimated structural", "structural parameters",
            "structural econometric"
        ],
        "moderate_signals": [
            "counterfactual simulation", "policy simulation",
            "model estimation", "estimated model", "simulated method of moments",
            "indirect inference", "maximum likelihood estimation"
        ],
        "weak_signals": [],
        "negative_signals": ["reduced-form", "quasi-experimental"],
        "implies": ["theory", "discrete_choice"]
    },

    "discrete_choice": {
        "name": "Discrete Choice Models",
        "parent": "structural_estimation",
        "strong_signals": [
            "discrete choice", "blp", "berry levinsohn pakes",
            "random coefficients logit", "mixed logit", "nested logit",
            "demand estimation"
        ],
        "moderate_signals": [
            "choice model", "multinomial logit", "conditional logit",
            "revealed preference"
        ],
        "weak_signals": [],
        "implied_by": ["structural_estimation"],
        "implies": ["structural_estimation"]
    },

    "game_theory": {
        "name": "Game Theory / Formal Models",
        "strong_signals": [
            "game theory", "game-theoretic", "nash equilibrium",
            "subgame perfect", "mechanism design", "formal model",
            "formal theory", "bayesian game", "perfect bayesian equilibrium"
        ],
        "moderate_signals": [
            "strategic interaction", "signaling model", "cheap talk",
            "principal-agent", "contract theory", "auction theory",
            "auction design", "information design", "screening model",
            "moral hazard", "adverse selection"
        ],
        "weak_signals": ["equilibrium", "strategic"],
        "implies": ["theory"]
    },

    # STATISTICAL / ML
    "machine_learning": {
        "name": "Machine Learning",
        "strong_signals": [
            "machine learning", "random forest", "neural network",
            "deep learning", "gradient boosting", "xgboost",
            "lasso regression", "ridge regression", "elastic net",
            "convolutional neural network", "recurrent neural network",
            "transformer model", "large language model"
        ],
        "moderate_signals": [
            "cross-validation", "out-of-sample prediction", "regularization",
            "supervised learning", "unsupervised learning",
            "training data", "test data", "feature selection",
            "classification", "clustering algorithm"
        ],
        "weak_signals": ["predictive model"],
        "implies": ["quantitative"]
    },

    "causal_ml": {
        "name": "Causal Machine Learning",
        "parent": "machine_learning",
        "siblings": ["causal_inference"],
        "strong_signals": [
            "causal forest", "double machine learning", "double ml",
            "causal ml", "heterogeneous treatment effects",
            "conditional average treatment effect", "cate",
            "generalized random forest"
        ],
        "moderate_signals": ["honest inference", "sample splitting", "debiased lasso"],
        "weak_signals": [],
        "implied_by": ["machine_learning", "causal_inference"],
        "implies": ["machine_learning", "causal_inference"]
    },

    "panel_data": {
        "name": "Panel Data Methods",
        "strong_signals": [
            "panel data", "longitudinal data", "panel regression",
            "panel fixed effects", "two-way fixed effects"
        ],
        "moderate_signals": [
            "fixed effects", "random effects", "within estimator",
            "individual fixed effects", "time fixed effects",
            "entity fixed effects", "hausman test"
        ],
        "weak_signals": [],
        "implies": ["quantitative"]
    },

    "time_series": {
        "name": "Time Series",
        "strong_signals": [
            "time series", "vector autoregression", "var model",
            "arima", "cointegration", "error correction model"
        ],
        "moderate_signals": [
            "granger causality", "impulse response", "autoregressive",
            "forecast error variance", "structural var", "svar"
        ],
        "weak_signals": [],
        "implies": ["quantitative"]
    },

    "text_analysis": {
        "name": "Text Analysis / NLP",
        "strong_signals": [
            "text analysis", "natural language processing", "text mining",
            "topic model", "topic modeling", "latent dirichlet allocation",
            "word embedding", "word2vec", "bert", "text as data"
        ],
        "moderate_signals": [
            "sentiment analysis", "text classification", "corpus",
            "textual analysis", "computational linguistics",
            "document classification"
        ],
        "weak_signals": [],
        "implies": ["quantitative"]
    },

    "network_analysis": {
        "name": "Network Analysis",
        "strong_signals": [
            "network analysis", "social network analysis", "network centrality",
            "network structure", "graph theory", "network topology",
            "network formation model"
        ],
        "moderate_signals": [
            "clustering coefficient", "degree distribution",
            "community detection", "network effects"
        ],
        "weak_signals": [],
        "negative_signals": ["neural network"],
        "implies": ["quantitative"]
    },

    "spatial": {
        "name": "Spatial Analysis",
        "strong_signals": [
            "spatial econometrics", "spatial analysis", "spatial regression",
            "geospatial analysis", "geographic information system",
            "spatial autoregressive"
        ],
        "moderate_signals": [
            "spatial correlation", "spatial dependence", "spatial lag",
            "spatial heterogeneity", "gis data"
        ],
        "weak_signals": [],
        "implies": ["quantitative"]
    },

    "bayesian": {
        "name": "Bayesian Methods",
        "strong_signals": [
            "bayesian estimation", "bayesian inference", "posterior distribution",
            "mcmc", "markov chain monte carlo", "gibbs sampling",
            "bayesian model"
        ],
        "moderate_signals": [
            "credible interval", "prior distribution", "bayesian approach",
            "bayesian updating"
        ],
        "weak_signals": [],
        "implies": ["quantitative"]
    },

    # QUALITATIVE
    "case_study": {
        "name": "Case Studies",
        "strong_signals": [
            "case study", "case-study", "single case", "comparative case",
            "within-case analysis", "case selection", "most-likely case"
        ],
        "moderate_signals": ["in-depth analysis", "detailed examination"],
        "weak_signals": [],
        "implies": ["qualitative"]
    },

    "process_tracing": {
        "name": "Process Tracing",
        "strong_signals": [
            "process tracing", "process-tracing", "causal mechanism",
            "causal process observation"
        ],
        "moderate_signals": ["mechanistic evidence", "within-case analysis"],
        "weak_signals": [],
        "implied_by": ["qualitative"],
        "implies": ["qualitative", "case_study"]
    },

    "comparative_historical": {
        "name": "Comparative Historical Analysis",
        "strong_signals": [
            "comparative historical analysis", "historical institutionalism",
            "path dependence", "critical juncture", "historical comparative"
        ],
        "moderate_signals": [
            "historical comparison", "historical analysis",
            "historical sociology", "archival research"
        ],
        "weak_signals": [],
        "implies": ["qualitative"]
    },

    "ethnography": {
        "name": "Ethnography",
        "strong_signals": [
            "ethnograph", "participant observation", "fieldwork",
            "ethnographic research", "field research"
        ],
        "moderate_signals": ["immersion", "field notes", "observational study"],
        "weak_signals": [],
        "implies": ["qualitative"]
    },

    "interviews": {
        "name": "Interviews",
        "strong_signals": [
            "semi-structured interview", "in-depth interview",
            "elite interview", "qualitative interview"
        ],
        "moderate_signals": ["interview data", "respondent", "interviewee"],
        "weak_signals": [],
        "implies": ["qualitative"]
    },

    "content_analysis": {
        "name": "Content Analysis",
        "strong_signals": [
            "content analysis", "qualitative content analysis", "coding scheme"
        ],
        "moderate_signals": ["thematic analysis", "codebook", "intercoder reliability"],
        "weak_signals": [],
        "implies": ["qualitative"]
    },

    "discourse_analysis": {
        "name": "Discourse Analysis",
        "strong_signals": [
            "discourse analysis", "critical discourse analysis",
            "framing analysis", "narrative analysis"
        ],
        "moderate_signals": ["discursive", "rhetorical analysis"],
        "weak_signals": [],
        "implies": ["qualitative"]
    },

    # SYNTHESIS
    "meta_analysis": {
        "name": "Meta-Analysis",
        "strong_signals": [
            "meta-analysis", "meta analysis", "systematic review",
            "pooled estimate", "systematic literature review"
        ],
        "moderate_signals": [
            "effect size", "publication bias", "forest plot", "funnel plot",
            "prisma", "heterogeneity across studies"
        ],
        "weak_signals": [],
        "implies": ["synthesis"]
    },

    "literature_review": {
        "name": "Literature Review",
        "strong_signals": [
            "literature review", "survey article", "review article",
            "state of the literature", "handbook chapter"
        ],
        "moderate_signals": ["overview of the literature", "we survey the"],
        "weak_signals": [],
        "implies": ["synthesis"]
    },

    # META-CATEGORIES
    "quantitative": {
        "name": "Quantitative Research",
        "strong_signals": [],
        "moderate_signals": [
            "regression analysis", "coefficient estimate", "standard error",
            "statistical significance", "confidence interval",
            "sample size", "ordinary least squares", "ols"
        ],
        "weak_signals": [],
        "implies": []
    },

    "qualitative": {
        "name": "Qualitative Research",
        "strong_signals": ["qualitative research", "qualitative methods"],
        "moderate_signals": ["qualitative", "fieldwork", "archival"],
        "weak_signals": [],
        "implies": []
    },

    "theory": {
        "name": "Theoretical Contribution",
        "strong_signals": [
            "theoretical model", "theoretical framework", "we model",
            "we develop a model", "we build a model"
        ],
        "moderate_signals": [
            "proposition", "theorem", "proof", "lemma", "corollary",
            "we show that", "we derive"
        ],
        "weak_signals": [],
        "implies": []
    },

    "synthesis": {
        "name": "Synthesis / Review",
        "strong_signals": [
            "systematic review", "literature survey", "meta-analysis",
            "review of the literature"
        ],
        "moderate_signals": ["we summarize", "existing evidence on"],
        "weak_signals": [],
        "implies": []
    }
}
