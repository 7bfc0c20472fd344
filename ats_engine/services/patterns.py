"""
Static keyword and regex libraries used by the ATS scoring services.

Every table here is immutable (tuples, frozensets, read-only mappings) and
loaded once at import time. Services take these tables as constructor
arguments with these values as defaults, so callers can swap in their own
libraries without touching module state.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Pattern


# Industry-standard ATS action verbs
ACTION_VERBS: tuple[str, ...] = (
    # Leadership & management
    "led", "managed", "directed", "supervised", "coordinated", "oversaw", "spearheaded", "mentored", "coached",
    # Achievement & results
    "achieved", "accomplished", "delivered", "exceeded", "surpassed", "attained", "earned", "generated",
    # Development & creation
    "developed", "created", "designed", "built", "established", "launched", "initiated", "pioneered", "founded",
    # Improvement & optimization
    "improved", "enhanced", "optimized", "streamlined", "transformed", "revamped", "modernized", "upgraded",
    # Analysis & research
    "analyzed", "researched", "evaluated", "assessed", "identified", "investigated", "examined", "audited",
    # Implementation & execution
    "implemented", "executed", "administered", "operated", "processed", "maintained", "performed",
    # Communication & collaboration
    "collaborated", "communicated", "negotiated", "presented", "facilitated", "liaised", "partnered",
    # Problem solving
    "resolved", "troubleshot", "diagnosed", "solved", "addressed", "mitigated", "prevented",
    # Growth & expansion
    "increased", "grew", "expanded", "scaled", "accelerated", "maximized", "boosted",
    # Reduction & efficiency
    "reduced", "decreased", "minimized", "eliminated", "cut", "consolidated", "saved",
)

QUANTIFIABLE_PATTERNS: tuple[Pattern[str], ...] = (
    re.compile(r"\d+%"),                                                # percentages
    re.compile(r"\$[\d,]+(?:K|M|B)?", re.I),                            # dollar amounts
    re.compile(r"\d+\s*(?:years?|yrs?|months?|mos?)", re.I),            # time periods
    re.compile(r"\d+\s*(?:team|people|members|employees|staff|reports)", re.I),
    re.compile(r"\d+\s*(?:projects?|initiatives?|programs?)", re.I),
    re.compile(r"\d+\s*(?:clients?|customers?|accounts?|users?)", re.I),
    re.compile(r"(?:increased|improved|grew|boosted|raised).*?\d", re.I),
    re.compile(r"(?:reduced|decreased|cut|saved|lowered).*?\d", re.I),
    re.compile(r"\d+\s*(?:per|/)\s*(?:day|week|month|year|hour)", re.I),
    re.compile(r"(?:top|#)\s*\d+", re.I),                               # rankings
    re.compile(r"\d+x", re.I),                                          # multipliers
    re.compile(r"\d{1,3}(?:,\d{3})+"),                                  # 1,000,000
)

# Any standalone metric token: 25%, $1.2M, 10,000, 3x
QUANTIFIABLE_TOKEN = re.compile(
    r"\d+(?:\.\d+)?%|\$[\d,.]+[KMB]?|\b\d{1,3}(?:,\d{3})+\b|\b\d+(?:\.\d+)?x\b",
    re.I,
)

# Situation / Task / Action / Result phrasing
STAR_PATTERNS: Mapping[str, Pattern[str]] = MappingProxyType({
    "situation": re.compile(
        r"\b(?:faced|facing|challeng\w*|when|during|amid|situation|problem|issue|initially|previously|inherited|legacy)\b",
        re.I,
    ),
    "task": re.compile(
        r"\b(?:tasked with|responsible for|goal|objective|assigned|needed to|charged with|mission|in order to|to ensure)\b",
        re.I,
    ),
    "action": re.compile(
        r"\b(?:led|developed|implemented|designed|created|built|managed|executed|launched|established|coordinated|introduced|automated)\b",
        re.I,
    ),
    "result": re.compile(
        r"\b(?:resulting in|resulted in|which led to|leading to|achieving|achieved|increased|reduced|improved|saved|delivered)\b|\d+%",
        re.I,
    ),
})

# High-impact achievement categories
IMPACT_PATTERNS: Mapping[str, Pattern[str]] = MappingProxyType({
    "revenue": re.compile(
        r"\b(?:revenue|sales|profit|income|bookings|arr|mrr)\b.*?\d|\d.*?\b(?:revenue|sales|profit)\b", re.I
    ),
    "cost_savings": re.compile(
        r"\b(?:saved|savings|cost reduction|reduced costs?|cut costs?|budget)\b", re.I
    ),
    "efficiency": re.compile(
        r"\b(?:efficiency|faster|reduced (?:time|latency)|turnaround|automated|streamlined|productivity)\b", re.I
    ),
    "growth": re.compile(
        r"\b(?:grew|growth|increased|expanded|scaled|doubled|tripled)\b", re.I
    ),
    "scale": re.compile(
        r"\b\d[\d,.]*\+?\s*(?:users|customers|clients|transactions|requests|servers|locations|countries|markets)\b", re.I
    ),
    "leadership": re.compile(
        r"\b(?:led|managed|mentored|supervised)\b.{0,40}?\b(?:team|engineers|people|staff|members|reports)\b", re.I
    ),
    "recognition": re.compile(
        r"\b(?:award(?:ed)?|recognized|promoted|honored|top performer|president'?s club|patent)\b", re.I
    ),
    "quality": re.compile(
        r"\b(?:accuracy|quality|uptime|satisfaction|nps|defects?|errors?|compliance)\b", re.I
    ),
})

# Secondary tech list used to cross-check a tech industry match
TECH_SKILLS_2025: tuple[str, ...] = (
    "python", "typescript", "javascript", "go", "rust", "java", "kotlin", "sql",
    "react", "next.js", "node.js", "fastapi", "django", "spring boot",
    "aws", "azure", "gcp", "kubernetes", "docker", "terraform", "serverless",
    "ci/cd", "github actions", "observability", "opentelemetry",
    "microservices", "graphql", "rest api", "event-driven", "kafka",
    "machine learning", "llm", "genai", "generative ai", "rag", "vector database",
    "langchain", "pytorch", "mlops", "data pipeline", "snowflake", "databricks",
    "zero trust", "devsecops", "platform engineering",
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
FREEMAIL_PATTERN = re.compile(r"gmail|yahoo|hotmail|outlook|aol", re.I)
UNPROFESSIONAL_EMAIL_PATTERN = re.compile(r"\d{4,}|sexy|hot|cool|ninja|420|69", re.I)
NAME_PATTERN = re.compile(r"^[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+$")
NAME_SPECIAL_CHARACTERS = re.compile(r"[^a-zA-Z\s\-.]")

ROLE_PATTERN = re.compile(
    r"\b(?:engineer|developer|manager|analyst|designer|specialist|consultant|coordinator|director|lead"
    r"|architect|executive|officer|administrator|associate)\b",
    re.I,
)
INDUSTRY_TERM_PATTERN = re.compile(
    r"\b(?:software|marketing|finance|healthcare|technology|sales|operations|product|data|business"
    r"|project|customer|human resources|IT)\b",
    re.I,
)
YEARS_PATTERN = re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:experience)?", re.I)

DEGREE_PATTERN = re.compile(
    r"\b(?:bachelor|master|phd|doctorate|associate|diploma|certificate|mba|bs|ba|ms|ma)\b", re.I
)

TECHNICAL_SKILL_PATTERN = re.compile(
    r"\b(?:javascript|typescript|python|java|c\+\+|c#|ruby|php|swift|kotlin|go|rust|sql|mysql|postgresql"
    r"|mongodb|react|angular|vue|node\.?js|express|django|flask|spring|docker|kubernetes|aws|azure|gcp"
    r"|git|jenkins|ci/cd|api|rest|graphql|html|css|sass|tailwind|excel|tableau|power\s?bi|salesforce"
    r"|sap|jira|agile|scrum|linux|windows|macos)\b",
    re.I,
)
SOFT_SKILL_PATTERN = re.compile(
    r"\b(?:communication|leadership|teamwork|problem[\s\-]?solving|analytical|creative|management"
    r"|collaboration|presentation|organization|critical\s?thinking|time\s?management|adaptability"
    r"|attention\s?to\s?detail|interpersonal|negotiation|conflict\s?resolution|decision[\s\-]?making"
    r"|strategic\s?planning)\b",
    re.I,
)
VAGUE_SKILL_PATTERN = re.compile(
    r"\b(?:hardworking|motivated|team\s?player|detail[\s\-]?oriented|self[\s\-]?starter|fast\s?learner"
    r"|passionate)\b",
    re.I,
)

BUSINESS_KEYWORD_PATTERN = re.compile(
    r"\b(?:project|team|client|customer|stakeholder|budget|deadline|process|system|strategy"
    r"|implementation|development|analysis|report|presentation|training|performance|quality"
    r"|compliance|innovation|optimization|efficiency|growth|revenue|cost|profit|ROI)\b",
    re.I,
)

PROBLEMATIC_CHARACTERS = re.compile(r"[│┃┄┅┆┇┈┉┊┋╌╍╎╏═║╒╓╔╕╖╗╘╙╚╛╜╝╞╟★☆●○◆◇■□▲△▶▷◀◁♦♠♣♥]")
EXCESSIVE_PUNCTUATION = re.compile(r"[!@#$%^&*()]{3,}")
BULLET_MARKERS = re.compile(r"[•\-*]")

# Recommendation substring -> priority weight
RECOMMENDATION_PRIORITIES: Mapping[str, int] = MappingProxyType({
    "action verb": 5,
    "quantifiable": 5,
    "skill": 4,
    "keyword": 4,
    "experience": 4,
    "summary": 3,
    "metric": 3,
    "education": 2,
    "format": 2,
    "contact": 2,
})


# Weak verb phrase -> (category, ranked strong replacements)
WEAK_VERBS: Mapping[str, tuple[str, tuple[str, ...]]] = MappingProxyType({
    # Generic / passive
    "did": ("Achievement", ("Accomplished", "Achieved", "Delivered", "Executed", "Completed")),
    "made": ("Creation", ("Developed", "Created", "Built", "Designed", "Engineered")),
    "worked": ("Contribution", ("Collaborated", "Contributed", "Partnered", "Drove", "Spearheaded")),
    "worked on": ("Contribution", ("Led", "Managed", "Directed", "Oversaw", "Championed")),
    "helped": ("Support", ("Facilitated", "Enabled", "Supported", "Mentored", "Guided")),
    "was responsible for": ("Leadership", ("Managed", "Directed", "Oversaw", "Led", "Owned")),
    "responsible for": ("Leadership", ("Managed", "Directed", "Oversaw", "Led", "Owned")),
    "handled": ("Management", ("Managed", "Coordinated", "Orchestrated", "Administered", "Executed")),
    "got": ("Achievement", ("Secured", "Obtained", "Acquired", "Earned", "Captured")),
    "used": ("Application", ("Leveraged", "Utilized", "Applied", "Employed", "Implemented")),
    "went": ("Action", ("Attended", "Participated", "Engaged", "Contributed", "Represented")),
    "had": ("Ownership", ("Maintained", "Possessed", "Held", "Managed", "Oversaw")),
    "was part of": ("Contribution", ("Contributed to", "Participated in", "Collaborated on", "Supported", "Drove")),
    "participated in": ("Contribution", ("Contributed to", "Collaborated on", "Engaged in", "Drove", "Led")),
    # Improvement
    "improved": ("Optimization", ("Enhanced", "Optimized", "Elevated", "Strengthened", "Boosted")),
    "changed": ("Transformation", ("Transformed", "Revamped", "Restructured", "Redesigned", "Overhauled")),
    "fixed": ("Problem Solving", ("Resolved", "Remediated", "Rectified", "Corrected", "Debugged")),
    "updated": ("Modernization", ("Modernized", "Upgraded", "Revitalized", "Refreshed", "Enhanced")),
    # Communication
    "talked": ("Communication", ("Presented", "Communicated", "Articulated", "Conveyed", "Delivered")),
    "told": ("Communication", ("Advised", "Informed", "Briefed", "Counseled", "Directed")),
    "said": ("Communication", ("Articulated", "Expressed", "Communicated", "Conveyed", "Stated")),
    "showed": ("Demonstration", ("Demonstrated", "Illustrated", "Presented", "Exhibited", "Showcased")),
    # Growth
    "grew": ("Growth", ("Expanded", "Scaled", "Accelerated", "Amplified", "Multiplied")),
    "increased": ("Growth", ("Boosted", "Elevated", "Maximized", "Amplified", "Surged")),
    "decreased": ("Efficiency", ("Reduced", "Minimized", "Streamlined", "Optimized", "Cut")),
    # Thinking / analysis
    "thought": ("Analysis", ("Analyzed", "Evaluated", "Assessed", "Strategized", "Conceptualized")),
    "looked at": ("Analysis", ("Analyzed", "Examined", "Evaluated", "Assessed", "Investigated")),
    "found": ("Discovery", ("Discovered", "Identified", "Uncovered", "Detected", "Pinpointed")),
    "learned": ("Development", (
        "Mastered", "Acquired", "Developed expertise in", "Gained proficiency in", "Specialized in",
    )),
    # Starting
    "started": ("Initiative", ("Launched", "Initiated", "Pioneered", "Established", "Founded")),
    "began": ("Initiative", ("Launched", "Initiated", "Commenced", "Pioneered", "Spearheaded")),
    "set up": ("Establishment", ("Established", "Implemented", "Deployed", "Configured", "Instituted")),
    # Collaboration
    "met with": ("Engagement", (
        "Engaged with", "Consulted with", "Partnered with", "Collaborated with", "Liaised with",
    )),
    "joined": ("Participation", (
        "Integrated into", "Contributed to", "Participated in", "Engaged with", "Collaborated with",
    )),
    # Management
    "ran": ("Leadership", ("Directed", "Managed", "Operated", "Administered", "Oversaw")),
    "led": ("Leadership", ("Spearheaded", "Directed", "Championed", "Orchestrated", "Headed")),
    "managed": ("Leadership", ("Directed", "Oversaw", "Supervised", "Administered", "Orchestrated")),
    # Generic action
    "do": ("Execution", ("Execute", "Perform", "Accomplish", "Deliver", "Complete")),
    "does": ("Execution", ("Executes", "Performs", "Accomplishes", "Delivers", "Completes")),
    "doing": ("Execution", ("Executing", "Performing", "Accomplishing", "Delivering", "Completing")),
    "try": ("Initiative", ("Attempt", "Endeavor", "Pursue", "Strive", "Undertake")),
    "tried": ("Initiative", ("Attempted", "Endeavored", "Pursued", "Strived", "Undertook")),
    # Support
    "assisted": ("Support", ("Supported", "Aided", "Facilitated", "Contributed to", "Enabled")),
    "supported": ("Enablement", ("Enabled", "Empowered", "Facilitated", "Bolstered", "Reinforced")),
})

POWER_VERBS_BY_CATEGORY: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Leadership": (
        "Spearheaded", "Directed", "Orchestrated", "Championed", "Pioneered",
        "Headed", "Captained", "Commanded", "Governed", "Presided",
    ),
    "Achievement": (
        "Accomplished", "Achieved", "Attained", "Exceeded", "Surpassed",
        "Delivered", "Captured", "Secured", "Won", "Earned",
    ),
    "Creation": (
        "Developed", "Designed", "Engineered", "Architected", "Constructed",
        "Built", "Created", "Formulated", "Devised", "Invented",
    ),
    "Improvement": (
        "Enhanced", "Optimized", "Streamlined", "Revitalized", "Modernized",
        "Upgraded", "Refined", "Elevated", "Strengthened", "Transformed",
    ),
    "Growth": (
        "Expanded", "Scaled", "Accelerated", "Amplified", "Multiplied",
        "Grew", "Boosted", "Increased", "Maximized", "Propelled",
    ),
    "Efficiency": (
        "Streamlined", "Automated", "Consolidated", "Simplified", "Reduced",
        "Eliminated", "Minimized", "Cut", "Decreased", "Lowered",
    ),
    "Analysis": (
        "Analyzed", "Evaluated", "Assessed", "Investigated", "Examined",
        "Diagnosed", "Audited", "Researched", "Studied", "Reviewed",
    ),
    "Communication": (
        "Presented", "Articulated", "Conveyed", "Communicated", "Negotiated",
        "Persuaded", "Advocated", "Influenced", "Briefed", "Counseled",
    ),
    "Technical": (
        "Engineered", "Architected", "Deployed", "Implemented", "Integrated",
        "Configured", "Debugged", "Programmed", "Automated", "Migrated",
    ),
    "Financial": (
        "Generated", "Saved", "Reduced costs by", "Increased revenue by", "Budgeted",
        "Forecasted", "Allocated", "Maximized ROI", "Secured funding", "Monetized",
    ),
})


# Standard skill categories, in match-priority order (first match wins)
SKILL_CATEGORIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Programming Languages": (
        "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "go", "golang",
        "rust", "swift", "kotlin", "php", "scala", "r", "matlab", "perl", "bash", "shell",
        "powershell", "sql", "html", "css", "sass", "less", "graphql", "solidity",
    ),
    "Frameworks & Libraries": (
        "react", "reactjs", "react.js", "angular", "vue", "vuejs", "vue.js", "next.js", "nextjs",
        "nuxt", "svelte", "node", "nodejs", "node.js", "express", "expressjs", "django",
        "flask", "fastapi", "spring", "spring boot", "springboot", ".net", "dotnet", "asp.net",
        "rails", "ruby on rails", "laravel", "symfony", "nestjs", "gatsby", "remix",
        "tailwind", "tailwindcss", "bootstrap", "material-ui", "mui", "chakra", "antd",
        "jquery", "redux", "mobx", "zustand", "tanstack", "react query", "prisma", "sequelize",
        "mongoose", "typeorm", "hibernate", "pytorch", "tensorflow", "keras", "scikit-learn",
        "pandas", "numpy", "dbt", "spark", "hadoop",
    ),
    "Cloud & DevOps": (
        "aws", "amazon web services", "azure", "microsoft azure", "gcp", "google cloud",
        "google cloud platform", "docker", "kubernetes", "k8s", "terraform", "ansible",
        "jenkins", "gitlab ci", "github actions", "circleci", "travis ci", "ci/cd", "cicd",
        "devops", "linux", "ubuntu", "centos", "nginx", "apache", "cloudflare", "vercel",
        "netlify", "heroku", "digitalocean", "lambda", "serverless", "ec2", "s3", "rds",
        "cloudwatch", "cloudformation", "ecs", "eks", "fargate", "helm", "istio", "prometheus",
        "grafana", "datadog", "new relic", "splunk", "elk", "elasticsearch", "logstash", "kibana",
    ),
    "Databases": (
        "postgresql", "postgres", "mysql", "mariadb", "sql server", "mssql", "oracle",
        "mongodb", "redis", "cassandra", "dynamodb", "firebase", "firestore", "supabase",
        "neo4j", "couchdb", "couchbase", "influxdb", "timescaledb", "sqlite", "snowflake",
        "bigquery", "redshift", "databricks", "dbt",
    ),
    "Tools & Platforms": (
        "git", "github", "gitlab", "bitbucket", "jira", "confluence", "slack", "trello",
        "asana", "notion", "figma", "sketch", "adobe xd", "invision", "zeplin", "postman",
        "insomnia", "swagger", "openapi", "vscode", "visual studio", "intellij", "webstorm",
        "pycharm", "eclipse", "vim", "emacs", "npm", "yarn", "pnpm", "webpack", "vite",
        "rollup", "parcel", "babel", "eslint", "prettier", "storybook", "chromatic",
        "sentry", "amplitude", "mixpanel", "segment", "hotjar", "google analytics",
        "looker", "tableau", "power bi", "excel", "google sheets", "airtable", "zapier",
        "make", "retool", "appsmith", "salesforce", "hubspot", "zendesk", "intercom",
    ),
    "Testing & QA": (
        "jest", "mocha", "chai", "jasmine", "cypress", "playwright", "selenium", "puppeteer",
        "testing library", "react testing library", "enzyme", "vitest", "pytest", "unittest",
        "junit", "testng", "rspec", "cucumber", "postman", "k6", "jmeter", "locust",
        "tdd", "bdd", "unit testing", "integration testing", "e2e testing", "qa", "quality assurance",
    ),
    "Security & Compliance": (
        "oauth", "oauth2", "jwt", "saml", "sso", "ldap", "active directory", "iam",
        "rbac", "encryption", "ssl", "tls", "https", "cors", "csrf", "xss", "sql injection",
        "penetration testing", "vulnerability assessment", "soc2", "soc 2", "hipaa",
        "gdpr", "pci", "pci-dss", "iso 27001", "nist", "owasp", "security+", "cissp",
        "cism", "ceh", "oscp", "firewall", "vpn", "waf", "siem",
    ),
    "Data & Analytics": (
        "data analysis", "data analytics", "data science", "machine learning", "ml",
        "deep learning", "ai", "artificial intelligence", "nlp", "natural language processing",
        "computer vision", "predictive modeling", "statistical analysis", "a/b testing",
        "etl", "data pipeline", "data warehouse", "data lake", "business intelligence", "bi",
        "data visualization", "data modeling", "feature engineering", "mlops", "llm",
        "generative ai", "genai", "chatgpt", "openai", "langchain", "rag", "vector database",
        "pinecone", "weaviate", "chromadb",
    ),
    "Mobile Development": (
        "ios", "android", "react native", "flutter", "xamarin", "cordova", "ionic",
        "swift", "swiftui", "objective-c", "kotlin", "java android", "xcode",
        "android studio", "mobile development", "app development", "testflight",
        "app store", "play store", "push notifications", "firebase", "expo",
    ),
    "Methodologies": (
        "agile", "scrum", "kanban", "waterfall", "lean", "six sigma", "devops",
        "devsecops", "sre", "site reliability", "itil", "prince2", "pmp",
        "safe", "scaled agile", "xp", "extreme programming", "pair programming",
        "code review", "sprint planning", "retrospective", "standup", "okr", "kpi",
    ),
    "Soft Skills": (
        "leadership", "team leadership", "management", "project management", "product management",
        "communication", "written communication", "verbal communication", "presentation",
        "public speaking", "negotiation", "conflict resolution", "problem solving",
        "critical thinking", "analytical thinking", "decision making", "time management",
        "organization", "prioritization", "multitasking", "attention to detail",
        "teamwork", "collaboration", "cross-functional", "stakeholder management",
        "mentoring", "coaching", "training", "customer service", "customer success",
        "relationship building", "networking", "adaptability", "flexibility", "creativity",
        "innovation", "strategic thinking", "strategic planning", "budgeting", "forecasting",
    ),
    "Design & UX": (
        "ui", "ux", "ui/ux", "user interface", "user experience", "product design",
        "interaction design", "visual design", "graphic design", "web design",
        "responsive design", "mobile design", "design systems", "wireframing",
        "prototyping", "user research", "usability testing", "accessibility", "a11y",
        "wcag", "figma", "sketch", "adobe xd", "invision", "principle", "framer",
        "photoshop", "illustrator", "after effects", "animation", "motion design",
    ),
    "Finance & Business": (
        "financial analysis", "financial modeling", "valuation", "budgeting", "forecasting",
        "p&l", "profit and loss", "revenue", "cost analysis", "roi", "irr", "npv",
        "cash flow", "balance sheet", "income statement", "gaap", "ifrs", "sox",
        "audit", "tax", "accounting", "bookkeeping", "quickbooks", "sap", "oracle financials",
        "workday", "netsuite", "erp", "crm", "salesforce", "hubspot", "marketo",
        "business development", "sales", "account management", "client relations",
    ),
    "Healthcare": (
        "hipaa", "ehr", "electronic health records", "emr", "epic", "cerner", "meditech",
        "hl7", "fhir", "icd-10", "cpt", "medical coding", "medical billing", "clinical",
        "patient care", "healthcare management", "pharmacy", "nursing", "telemedicine",
        "telehealth", "medical devices", "fda", "clinical trials", "regulatory affairs",
    ),
})

CATEGORY_ICONS: Mapping[str, str] = MappingProxyType({
    "Programming Languages": "code",
    "Frameworks & Libraries": "package",
    "Cloud & DevOps": "cloud",
    "Databases": "database",
    "Tools & Platforms": "wrench",
    "Testing & QA": "check-circle",
    "Security & Compliance": "shield",
    "Data & Analytics": "bar-chart",
    "Mobile Development": "smartphone",
    "Methodologies": "git-branch",
    "Soft Skills": "users",
    "Design & UX": "palette",
    "Finance & Business": "briefcase",
    "Healthcare": "heart",
})


# Industry keyword libraries
INDUSTRY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "tech": (
        "Agile", "Scrum", "CI/CD", "DevOps", "Cloud", "AWS", "Azure", "GCP", "Kubernetes", "Docker",
        "REST API", "GraphQL", "Microservices", "Machine Learning", "AI/ML", "LLM", "GenAI",
        "TypeScript", "Python", "React", "Node.js", "SQL", "NoSQL", "Git", "TDD", "System Design",
        "Scalability", "Performance Optimization", "Data Pipeline", "ETL", "Full-Stack",
    ),
    "finance": (
        "Financial Analysis", "Risk Management", "Portfolio Management", "Due Diligence", "M&A",
        "Valuation", "DCF", "LBO", "Excel Modeling", "Bloomberg Terminal", "SQL", "Python",
        "Regulatory Compliance", "SOX", "GAAP", "IFRS", "Basel III", "AML/KYC", "P&L Management",
        "Forecasting", "Budgeting", "Variance Analysis", "Investment Banking", "Private Equity",
        "Asset Management", "Derivatives", "Fixed Income", "Equity Research", "CFA", "FRM",
    ),
    "healthcare": (
        "HIPAA Compliance", "EHR/EMR", "Epic", "Cerner", "Clinical Operations", "Patient Care",
        "Quality Improvement", "Joint Commission", "CMS Regulations", "ICD-10", "CPT Coding",
        "Revenue Cycle", "Population Health", "Care Coordination", "Value-Based Care",
        "Clinical Research", "FDA Regulations", "GCP/GLP", "Pharmacovigilance", "Medical Affairs",
        "Healthcare Analytics", "Telehealth", "Patient Safety", "Nursing Leadership", "BLS/ACLS",
    ),
})

INDUSTRY_CONTEXT_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "tech": (
        "software", "developer", "engineer", "programming", "code", "coding", "technical",
        "database", "frontend", "backend", "full-stack", "fullstack", "web", "mobile", "app",
        "startup", "saas", "platform", "infrastructure", "architecture", "devops", "sre",
        "data science", "analytics", "machine learning", "artificial intelligence", "blockchain",
        "cybersecurity", "security", "network", "systems", "linux", "unix", "windows server",
    ),
    "finance": (
        "bank", "banking", "investment", "trading", "capital", "asset", "portfolio",
        "financial", "finance", "accounting", "accountant", "cpa", "audit", "auditor",
        "analyst", "advisory", "consulting", "wealth", "hedge fund", "private equity",
        "venture capital", "vc", "equity", "credit", "risk", "compliance", "treasury",
        "fintech", "insurance", "actuary", "tax", "budget", "revenue", "profit",
    ),
    "healthcare": (
        "hospital", "clinic", "medical", "medicine", "physician", "doctor", "nurse", "nursing",
        "patient", "clinical", "health", "healthcare", "pharma", "pharmaceutical", "biotech",
        "biotechnology", "life sciences", "lab", "laboratory", "diagnostic", "therapeutic",
        "surgical", "surgery", "treatment", "therapy", "care", "wellness", "mental health",
        "dental", "radiology", "oncology", "cardiology", "pediatric", "emergency", "icu",
    ),
})

INDUSTRY_JOB_TITLES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "tech": (
        "software engineer", "developer", "programmer", "data scientist", "data analyst",
        "product manager", "ux designer", "ui designer", "devops engineer", "sre",
        "qa engineer", "test engineer", "solutions architect", "cloud engineer",
        "machine learning engineer", "ai engineer", "security engineer", "it manager",
        "scrum master", "tech lead", "engineering manager", "cto", "vp engineering",
    ),
    "finance": (
        "financial analyst", "investment banker", "portfolio manager", "trader",
        "risk analyst", "credit analyst", "accountant", "auditor", "controller",
        "cfo", "finance manager", "wealth advisor", "financial planner", "actuary",
        "compliance officer", "underwriter", "loan officer", "tax manager",
        "treasury analyst", "fp&a analyst", "equity analyst", "research analyst",
    ),
    "healthcare": (
        "registered nurse", "nurse practitioner", "physician", "doctor", "surgeon",
        "medical assistant", "clinical manager", "healthcare administrator", "pharmacist",
        "physical therapist", "occupational therapist", "radiologist", "lab technician",
        "medical director", "chief nursing officer", "patient care coordinator",
        "health information manager", "clinical research coordinator", "medical coder",
    ),
})

INDUSTRY_NAMES: Mapping[str, str] = MappingProxyType({
    "tech": "Tech & Engineering",
    "finance": "Finance & Banking",
    "healthcare": "Healthcare & Medical",
})


@dataclass(frozen=True)
class PatternLibrary:
    """Bundle of tables the ATS checker scores against."""
    action_verbs: tuple[str, ...] = ACTION_VERBS
    quantifiable_patterns: tuple[Pattern[str], ...] = QUANTIFIABLE_PATTERNS
    # Read-only mappings are unhashable, so they need a factory
    star_patterns: Mapping[str, Pattern[str]] = field(default_factory=lambda: STAR_PATTERNS)
    impact_patterns: Mapping[str, Pattern[str]] = field(default_factory=lambda: IMPACT_PATTERNS)
    industry_keywords: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: INDUSTRY_KEYWORDS)
    tech_skills: tuple[str, ...] = TECH_SKILLS_2025
    recommendation_priorities: Mapping[str, int] = field(default_factory=lambda: RECOMMENDATION_PRIORITIES)
    action_verb_patterns: tuple[Pattern[str], ...] = field(init=False, repr=False)

    def __post_init__(self):
        # Verb plus any word suffix, so "led" also counts inside "ledger"
        object.__setattr__(
            self,
            "action_verb_patterns",
            tuple(re.compile(rf"\b{re.escape(verb)}\w*\b", re.I) for verb in self.action_verbs),
        )


DEFAULT_LIBRARY = PatternLibrary()
