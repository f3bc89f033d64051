"""Canned content served when live transcription or generation is unavailable."""

TRANSCRIPTS: tuple[str, ...] = (
    "Breaking news from downtown today. City officials announced an infrastructure project starting next month that adds new bike lanes and repaves the main corridor.",
    "The city council voted unanimously last night to fund a new community center. The facility will offer programs for families and seniors near the waterfront.",
    "Weather update: forecasters expect heavy rain this weekend. Residents in low-lying neighborhoods near the coast should prepare for possible flooding.",
    "Sports update: the high school basketball team clinched a spot in the state championship after an overtime win at home on Friday.",
    "Business news: a local software startup plans to hire fifty people over the next six months and is opening a second office downtown.",
    "Restaurant news: a family-owned cafe on State Street has doubled its patio seating ahead of the busy summer season.",
    "Community update: the public library is starting a series of free digital skills workshops for seniors next week.",
    "Traffic alert: lane closures on the highway near downtown will slow the morning commute through the end of the month.",
    "Education news: the school district is rolling out a tablet program and a refreshed digital curriculum for middle school students.",
    "Health update: the county health department launched a wellness program focused on preventive care and free screenings.",
    "Environmental news: the city and local volunteer groups are expanding curbside recycling and adding compost collection this fall.",
    "Arts and culture: the museum of art opens an exhibition of regional painters next month that will run through the holidays.",
    "Transportation update: the transit district is adding bus routes that connect residential neighborhoods with the business district.",
    "Real estate news: local property values rose steadily this quarter, which agents attribute to strong demand and limited inventory.",
    "Technology update: a downtown engineering firm closed a major investment round and expects to double its local workforce.",
)

KEYWORD_SETS: dict[str, frozenset[str]] = {
    "business": frozenset(
        {"business", "company", "startup", "entrepreneur", "revenue", "profit", "market", "industry"}
    ),
    "community": frozenset(
        {"community", "local", "residents", "city", "council", "public", "service"}
    ),
    "infrastructure": frozenset(
        {"project", "construction", "development", "infrastructure", "building", "facility"}
    ),
    "sports": frozenset(
        {"team", "game", "championship", "victory", "sports", "basketball", "football"}
    ),
    "weather": frozenset(
        {"weather", "rain", "storm", "flood", "meteorologist", "forecast"}
    ),
}

PRIORITY_ORDER: tuple[str, ...] = (
    "business",
    "community",
    "infrastructure",
    "sports",
    "weather",
)

DEFAULT_CATEGORY = "general"

TITLES: dict[str, tuple[str, ...]] = {
    "business": (
        "Local Business Expands Operations Downtown",
        "New Business Initiative Brings Jobs to the Region",
        "Entrepreneur Shares Lessons From a Growing Local Market",
        "Business Leaders Weigh Opportunities for Economic Growth",
    ),
    "community": (
        "Community Center Receives Major Funding Boost",
        "Residents Rally Behind Neighborhood Improvements",
        "City Council Approves Community Development Plan",
        "Community Leaders Respond to Local Concerns",
    ),
    "infrastructure": (
        "Major Infrastructure Project Breaks Ground",
        "City Announces New Development Initiative",
        "Construction Project Aims to Ease Local Traffic",
        "Infrastructure Investment Set to Benefit Residents",
    ),
    "sports": (
        "Local Team Captures Championship Victory",
        "High School Athletics Program Celebrates a Winning Season",
        "Community Turns Out for Athletic Milestone",
        "Local Athletes Shine in State Competition",
    ),
    "weather": (
        "Weather Alert: Residents Advised to Prepare",
        "Forecasters Predict Significant Weather Changes",
        "Weather Update: Safety Precautions Recommended",
        "Weather Service Issues Advisory for the Area",
    ),
    "general": (
        "Local Officials Announce Community Initiative",
        "Residents Discuss the Issues Shaping the Area",
        "Community Update: New Developments Across Town",
        "Local News: Important Updates for Residents",
    ),
}

ARTICLES: dict[str, str] = {
    "business": """By Staff Reporter

Local business leaders have announced developments that are expected to shape the regional economy over the coming year.

According to people familiar with the plans, the expansion will create new opportunities for residents and bring additional investment to the area. The project has been in preparation for several months.

Stakeholders stressed the importance of an environment that supports entrepreneurship, and said they expect the effects to reach suppliers and neighboring businesses.

Residents and local officials welcomed the news, pointing to new jobs and increased activity downtown.

The first phase is scheduled to begin in the coming months, and organizers have promised regular updates as work progresses.""",
    "community": """By Staff Reporter

Community leaders have announced a new initiative aimed at residents across the area, developed jointly by local organizations and city officials.

The program focuses on long-standing neighborhood needs, and organizers said public input shaped its priorities from the start.

Officials emphasized that continued participation from residents will be essential, and the plan includes several components addressing different parts of community life.

Early reactions have been positive, with many residents saying the effort addresses concerns raised at recent public meetings.

The initiative will roll out in phases, with further opportunities for feedback along the way.""",
    "infrastructure": """By Staff Reporter

City officials have announced a major infrastructure project that will improve roads, utilities and public facilities.

Planning has been underway for months with input from engineers and community stakeholders, and officials describe the work as an investment in the area's long-term growth.

Business owners along the affected corridors said they expect improved access once construction is complete, although some short-term disruption is likely.

Work will proceed in phases to limit closures, and the city has committed to posting schedules and detours in advance.

Residents can follow the project's progress through the city's public works updates.""",
    "sports": """By Staff Reporter

Local athletes have delivered a standout season, bringing statewide attention to the area's sports programs.

Coaches credited months of preparation and strong support from families and fans for the team's results.

Administrators praised the players for their sportsmanship and said the achievement reflects the investment the community has made in youth athletics.

Local businesses and residents have joined in the celebration, with many turning out to cheer the team at recent games.

The season's success is expected to inspire the next group of student-athletes.""",
    "weather": """By Staff Reporter

Forecasters are advising residents to prepare for significant weather changes over the coming days.

Current models point to substantial rainfall and the possibility of localized flooding, particularly in low-lying neighborhoods.

Local officials have activated preparedness plans and are monitoring conditions closely, and community resources are available for residents who need assistance.

Residents are encouraged to follow official channels for updates and to secure outdoor items before the storm arrives.

Emergency services report that they are ready to respond if conditions worsen.""",
    "general": """By Staff Reporter

Local officials have announced developments that will affect residents across the area in the months ahead.

The announcement follows an extended period of planning and public input, and officials say the plan addresses several community priorities at once.

Residents have responded with interest, citing the potential for improved services and a better quality of life.

Leaders emphasized that ongoing engagement will be key, and promised regular updates as the work moves forward.

Further details are expected at upcoming public meetings.""",
}
