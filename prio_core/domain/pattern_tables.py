"""Pattern tables for priority classification.

Each table is an ordered tuple of regular expressions. Order matters: the
library reports matched literals in the order the patterns are listed here,
and those literals become the "why" signals shown to users. All patterns are
compiled case-insensitively.
"""

from typing import Final

from prio_core.domain.models import PatternCategory

URGENCY_PATTERNS: Final[tuple[str, ...]] = (
    # Explicit urgency words
    r"\b(urgent|asap|immediately|emergency|critical|crisis)\b",
    r"\b(now|right now|right away|this instant)\b",
    r"\b(first thing|top priority|highest priority)\b",
    # Today/tonight deadlines
    r"\b(today|tonight|this morning|this afternoon|this evening)\b",
    r"\b(before|by|until)\s+(today|tonight|end of day|EOD|close of business|COB)\b",
    r"\bend of (day|today)\b",
    r"\b(by|before)\s+(noon|midnight|5pm|6pm|end of business)\b",
    # Overdue
    r"\b(overdue|late|behind|past due|missed|expired)\b",
    r"\bwas due\b",
    r"\bshould have (been done|finished|completed)\b",
    # Short relative time
    r"\b(in|within)\s+(\d+|one|two|three|a few)\s*(hour|minute|min|hr)s?\b",
    r"\bdue\s+(today|now|immediately|asap)\b",
    r"\b(deadline|due)\s+(today|tomorrow|tonight)\b",
    r"\bdeadline\s+(approaching|coming up|soon)\b",
    r"\bhas\s+a\s+deadline\s+(today|tomorrow)\b",
    # System/production emergencies
    r"\b(server|system|app|site|service|website)\s+(is\s+)?(down|crashed?|outage|issue|error|failure)\b",
    r"\b(server|system|app|site|service|website).{0,10}(down|crash|outage|failure)\b",
    r"\b(down|crash|outage|failure).*(server|system|app|site|service)\b",
    r"\b(production|prod)\s*(is\s+)?(issue|problem|bug|error|incident|fire|down)\b",
    r"\b(pager|alert|alarm|monitoring)\s*(going off|triggered|critical)\b",
    r"\b(fix|resolve|address)\s*(immediately|now|asap|urgent)\b",
    r"\b(hotfix|hot fix|patch)\b",
    r"\b(outage|incident|sev[0-9]|severity\s*[0-9])\b",
    r"\b(users|customers)\s+(cannot|can't|unable to|experiencing)\b",
    r"\bbroken\s+(build|pipeline|deployment|feature)\b",
    r"\bblocking\s+(release|deploy|launch|other)\b",
    r"\brollback\s+(needed|required|now)\b",
    r"\bescalation\b",
    # Client/stakeholder waiting
    r"\b(client|customer|stakeholder)\s*(waiting|asking|calling|urgent|needs)\b",
    r"\bwaiting\s+(on|for)\s+(you|me|us|this|response|answer)\b",
    r"\b(promised|committed)\s+(by|to deliver)\s+(today|tomorrow)\b",
    r"\b(ceo|boss|manager|director|vp)\s*(asking|needs|waiting|wants)\b",
    r"\bexpecting\s+(today|this|a response|an answer)\b",
    r"\b(demo|presentation|meeting)\s+(in|starts?)\s+(\d+)\s*(min|hour)\b",
    r"\b(call|meeting)\s+(today|now|shortly|in\s+\d+\s*min)\b",
    r"\bboard\s+(meeting|presentation|review)\b",
)
"""Signals that a task needs attention soon."""

IMPORTANCE_PATTERNS: Final[tuple[str, ...]] = (
    # Explicit importance words
    r"\b(important|crucial|vital|essential|key|strategic|significant)\b",
    r"\b(matters|meaningful|high impact|valuable)\b",
    r"\b(priority|prioritize|must do|need to|have to)\b",
    # Career
    r"\b(career|promotion|performance|review|evaluation|raise|salary)\b",
    r"\b(job|interview|offer|resign|hire|onboard)\b",
    r"\b(resume|cv|portfolio|application)\b",
    r"\b(networking|mentor|mentee|referral)\b",
    r"\b(skill|skills|expertise|competency)\b",
    r"\b(certification|certificate|credential)\b",
    r"\b(leadership|lead|manage|initiative)\b",
    r"\b(presentation|present to|pitch to)\b",
    r"\b(growth|advancement|opportunity)\b",
    r"\b(1:1|one on one|feedback session)\b",
    r"\b(okr|kpi|objective|key result)\b",
    r"\b(quarter|quarterly|annual)\s*(goal|review|planning)\b",
    # Health
    r"\b(health|doctor|medical|hospital|clinic)\b",
    r"\b(appointment|checkup|check-up|physical)\b",
    r"\b(prescription|medication|medicine|pharmacy)\b",
    r"\b(symptom|sick|illness|pain|injury)\b",
    r"\b(exercise|workout|gym|run|fitness|yoga|meditation)\b",
    r"\b(sleep|rest|recovery|mental health)\b",
    r"\b(diet|nutrition|eating|weight)\b",
    r"\b(therapy|therapist|counseling|counselor)\b",
    r"\b(dentist|dental|teeth|vision|eye|optometrist)\b",
    r"\b(vaccine|vaccination|immunization|screening)\b",
    # Family
    r"\b(family|spouse|partner|wife|husband|child|children|kid|kids|parent|mom|dad)\b",
    r"\b(wedding|anniversary|birthday|graduation|celebration)\b",
    r"\b(relationship|marriage|dating|partner)\b",
    r"\b(school|teacher|parent-teacher|pta)\b",
    r"\b(daycare|babysitter|childcare|nanny)\b",
    r"\b(elderly|aging parent|caregiver|care for)\b",
    r"\b(pet|vet|veterinarian)\b",
    r"\b(home|house|moving|renovation|repair)\b",
    # Financial
    r"\b(tax|taxes|irs|tax return|w-2|1099)\b",
    r"\b(financial|budget|investment|retirement|401k|ira)\b",
    r"\b(mortgage|loan|debt|payment|bills|rent)\b",
    r"\b(insurance|policy|coverage|claim)\b",
    r"\b(savings|emergency fund|financial goal)\b",
    r"\b(bank|banking|account|transfer)\b",
    r"\b(credit|credit score|credit card|debt)\b",
    r"\b(expense|expenses|reimbursement)\b",
    r"\b(invoice|billing|payment due)\b",
    r"\b(audit|auditing|compliance|regulatory)\b",
    # Legal/compliance
    r"\b(contract|agreement|sign|signature|legal|lawyer|attorney)\b",
    r"\b(court|lawsuit|litigation|dispute)\b",
    r"\b(deadline|filing|file by|submit by)\b",
    r"\b(compliance|regulation|regulatory|requirement)\b",
    r"\b(license|permit|registration|renewal)\b",
    r"\b(patent|trademark|copyright|intellectual property)\b",
    # Learning/development
    r"\b(learn|study|course|class|training|workshop)\b",
    r"\b(read|book|research|understand|explore)\b",
    r"\b(degree|education|school|university|college)\b",
    r"\b(practice|skill building|improve|master)\b",
    r"\b(tutorial|lesson|lecture|webinar)\b",
    r"\b(homework|assignment|project|thesis)\b",
    # Business impact
    r"\b(client|customer|investor|board|stakeholder|executive)\b",
    r"\b(project|deliverable|release|launch|milestone)\b",
    r"\b(report|analysis|review|proposal|documentation)\b",
    r"\b(decision|approve|sign-off|approval)\b",
    r"\b(submit|complete|finish|deliver|ship|deploy)\b",
    r"\b(prepare|create|build|develop|design)\b",
    r"\b(strategy|plan|planning|roadmap|vision)\b",
    r"\b(revenue|sales|profit|cost|budget|forecast)\b",
    r"\b(partnership|acquisition|merger|deal)\b",
    r"\b(hire|firing|restructure|layoff)\b",
    # Production emergencies carry importance as well as urgency
    r"\b(server|system|app|site|service|website)\s+(is\s+)?(down|crashed?|outage|failure)\b",
    r"\b(server|system|app|site|service|website).{0,10}(down|crash|outage|failure)\b",
    r"\b(production|prod)\s*(is\s+)?(issue|problem|bug|error|incident|down)\b",
    r"\b(data)\s*(loss|corruption|at risk|affected)\b",
    r"\b(users?|customers?)\s*(affected|impacted|cannot|can't|unable)\b",
    r"\b(outage|incident|sev[0-9]|severity\s*[0-9]|critical)\b",
    r"\b(emergency|crisis)\b",
    r"\baffecting\s+(all|many|customers?|users?)\b",
    r"\b(hotfix|rollback|emergency\s+fix)\b",
    r"\bfix\s+(immediately|now|asap|urgent)\b",
)
"""Signals that a task has significant impact."""

DELEGATION_PATTERNS: Final[tuple[str, ...]] = (
    # Explicit delegation
    r"\b(delegate|assign|ask\s+.+\s+to|have\s+.+\s+do)\b",
    r"\b(someone else|team can|anyone can)\b",
    r"\b(get\s+.+\s+to\s+help)\b",
    # Routine/recurring
    r"\b(routine|regular|recurring|standard|periodic)\b",
    r"\b(weekly|monthly|daily|biweekly)\s+(report|update|check|task)\b",
    # Administrative/logistics
    r"\border\s+(office\s+)?supplies\b",
    r"\boffice\s+supplies\b",
    r"\b(schedule|book|reserve)\s+(meeting|room|flight|hotel|restaurant|travel|lunch|dinner|event)\b",
    r"\b(schedule|book|reserve)\s+(the\s+)?(team\s+)?(meeting|lunch|dinner|event|outing|activity)\b",
    r"\b(arrange|set up|organize)\s+(meeting|call|event|lunch|dinner|party|celebration)\b",
    r"\b(book|reserve)\s+(travel|flights?|tickets?|transportation)\b",
    r"\b(team\s+)?(lunch|dinner|outing|building|event)\b.*\b(schedule|book|organize|arrange)\b",
    r"\b(schedule|plan|organize)\s+.*(team|group)\s*(lunch|dinner|outing|event|activity|building)\b",
    # Status updates and reports
    r"\bstatus\s+(report|update|check|meeting)\b",
    r"\bweekly\s+.*report\b",
    r"\b(compile|gather|collect)\s+.*report\b",
    r"\b(send|share)\s+.*update\b",
    # Surveys and forms
    r"\b(survey|poll|feedback|form|questionnaire)\b",
    r"\bfill\s+(out|in)\s+(form|survey|questionnaire)\b",
    # Data entry
    r"\b(update|enter|log|record)\s+.*(data|spreadsheet|system|database|crm)\b",
    r"\b(input|entry|logging)\b",
    # Filing
    r"\b(file|organize|sort|archive)\s+.*(documents|files|papers|folders)\b",
    r"\b(backup|back up)\s+.*(files|data)\b",
    # Basic communication
    r"\b(forward|cc|bcc|reply to)\s+.*(email|message)\b",
    r"\b(send|forward)\s+.*(reminder|notice|announcement)\b",
    # Coordination
    r"\b(coordinate|reschedule|follow up)\b",
    r"\bsend\s+calendar\s+invite\b",
    # Non-strategic purchasing
    r"\b(order|reorder|purchase)\s+.*(supplies|materials|equipment)\b",
    r"\b(renew|renewal)\s+.*(subscription|license|membership)\b",
    # Lookups
    r"\blook\s+up\s+.*(info|information|details|contact)\b",
    r"\bfind\s+.*(phone|email|address|contact)\b",
    # Minor maintenance
    r"\bminor\s+(fix|update|change|adjustment)\b",
    r"\b(update|change)\s+.*(password|settings|preferences)\b",
)
"""Signals of routine or administrative work someone else could do."""

LOW_PRIORITY_PATTERNS: Final[tuple[str, ...]] = (
    # Hedging
    r"\b(maybe|someday|eventually|when I have time|if I have time)\b",
    r"\b(nice to have|would be good|could|might)\b",
    r"\b(optional|not required|not urgent|low priority|non-essential)\b",
    r"\b(no rush|no hurry|whenever|at some point)\b",
    r"\bif\s+(time|possible|i get a chance)\b",
    # Leisure
    r"\b(browse|scroll|watch|binge|stream)\b",
    r"\b(social media|youtube|netflix|reddit|twitter|instagram|tiktok|facebook)\b",
    r"\b(game|gaming|play|entertainment)\b",
    r"\b(tv|show|series|movie)\b",
    r"\b(podcast|music|playlist)\b",
    # Non-essential reorganisation
    r"\b(reorganize|rearrange|tidy|declutter)\s+(bookshelf|desk|closet|room|drawer)\b",
    r"\b(clean|organize)\s+(files|photos|music|apps|downloads)\b",
    r"\b(sort|organize)\s+(old|unused)\b",
    # Wishlist
    r"\b(wish|want to|would like to|thinking about)\b",
    r"\b(daydream|fantasy|dream about)\b",
    r"\bwishlist\b",
    # Idle curiosity
    r"\b(look into|check out|explore)\s+.*(fun|interesting|cool|random)\b",
    r"\brandom\s+(idea|thought|thing)\b",
    # Trivial errands
    r"\b(just|only)\s+(check|look|see|browse|glance)\b",
    r"\bquick\s+(look|check|glance)\b",
    # Vague
    r"^(stuff|things|misc|miscellaneous|other|various)$",
    r"\bsomething\s+(about|with|for)\b",
    # Repeats
    r"\b(third time|again|another|repeat|redo)\b",
    r"\bdid this (before|already|last)\b",
)
"""Signals of optional, leisure or vague tasks."""

SOON_DEADLINE_PATTERNS: Final[tuple[str, ...]] = (
    r"\b(today|tonight|this morning|this afternoon|this evening)\b",
    r"\btomorrow\b",
    r"\bby\s+(monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b",
    r"\bin\s+(1|one|2|two|3|three)\s+days?\b",
    r"\bdue\s+(today|tomorrow|soon)\b",
    r"\bthis\s+week\b",
    r"\bEOD|EOW\b",
    r"\bend\s+of\s+(week|day)\b",
    r"\bwithin\s+\d+\s+hours?\b",
)
"""Phrases implying a deadline within a few days."""

FUTURE_DEADLINE_PATTERNS: Final[tuple[str, ...]] = (
    r"\bnext\s+(week|month|year)\b",
    r"\bin\s+(\d+|several)\s+weeks?\b",
    r"\bby\s+(next|end of)\s+(month|quarter|year)\b",
    r"\b(Q[1-4]|quarter)\b",
    r"\beventually\b",
    r"\bno\s+(deadline|due date|rush|hurry)\b",
    r"\blong\s+term\b",
    r"\bfuture\b",
)
"""Phrases implying a comfortable, distant deadline."""

PATTERN_TABLES: Final[dict[PatternCategory, tuple[str, ...]]] = {
    PatternCategory.URGENCY: URGENCY_PATTERNS,
    PatternCategory.IMPORTANCE: IMPORTANCE_PATTERNS,
    PatternCategory.DELEGATION: DELEGATION_PATTERNS,
    PatternCategory.LOW_PRIORITY: LOW_PRIORITY_PATTERNS,
    PatternCategory.SOON_DEADLINE: SOON_DEADLINE_PATTERNS,
    PatternCategory.FUTURE_DEADLINE: FUTURE_DEADLINE_PATTERNS,
}
"""All pattern tables keyed by category."""

MIN_PATTERNS_PER_SIGNAL_CATEGORY: Final[int] = 20
"""Every signal category (not the temporal hint tables) carries at least this many."""
