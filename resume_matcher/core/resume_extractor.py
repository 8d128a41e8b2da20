"""
Resume Extractor - Turns raw resume text into a structured profile fragment.

Extraction is heuristic: skills come from a fixed catalogue of known terms,
and the experience, education and project sections are located by their
headings and then split on line-level patterns (date ranges, degree names,
short title lines). Nothing here raises on odd input; sections that cannot
be found come back empty.
"""

from typing import Optional
import re

from .models import (
    ProfileFragment,
    ExperienceEntry,
    EducationEntry,
    ProjectEntry,
)


def term_regex(pattern: str) -> re.Pattern:
    """Compile a catalogue pattern as a case-insensitive whole-term match.

    Lookarounds are used instead of \\b so that terms ending in punctuation
    (C++, C#) still match.
    """
    return re.compile(rf"(?<!\w){pattern}(?!\w)", re.IGNORECASE)


# (display name, pattern) pairs, tested in order
SKILL_CATALOGUE: tuple[tuple[str, str], ...] = (
    ("JavaScript", r"JavaScript"),
    ("TypeScript", r"TypeScript"),
    ("Python", r"Python"),
    ("Java", r"Java"),
    ("C++", r"C\+\+"),
    ("C#", r"C#"),
    ("Ruby", r"Ruby"),
    ("Go", r"Go"),
    ("Rust", r"Rust"),
    ("PHP", r"PHP"),
    ("React", r"React"),
    ("Angular", r"Angular"),
    ("Vue", r"Vue"),
    ("Next.js", r"Next\.js"),
    ("Svelte", r"Svelte"),
    ("Node.js", r"Node\.js"),
    ("Express", r"Express"),
    ("Django", r"Django"),
    ("Flask", r"Flask"),
    ("FastAPI", r"FastAPI"),
    ("SQL", r"SQL"),
    ("MongoDB", r"MongoDB"),
    ("PostgreSQL", r"PostgreSQL"),
    ("MySQL", r"MySQL"),
    ("Redis", r"Redis"),
    ("GraphQL", r"GraphQL"),
    ("Prisma", r"Prisma"),
    ("AWS", r"AWS"),
    ("Azure", r"Azure"),
    ("GCP", r"GCP"),
    ("Docker", r"Docker"),
    ("Kubernetes", r"Kubernetes"),
    ("CI/CD", r"CI/CD"),
    ("Jenkins", r"Jenkins"),
    ("GitHub Actions", r"GitHub\s+Actions"),
    ("HTML", r"HTML"),
    ("CSS", r"CSS"),
    ("Tailwind", r"Tailwind"),
    ("Bootstrap", r"Bootstrap"),
    ("SASS", r"SASS"),
    ("Git", r"Git"),
    ("GitHub", r"GitHub"),
    ("GitLab", r"GitLab"),
    ("Machine Learning", r"Machine\s+Learning"),
    ("AI", r"AI"),
    ("Data Science", r"Data\s+Science"),
    ("TensorFlow", r"TensorFlow"),
    ("PyTorch", r"PyTorch"),
    ("Pandas", r"Pandas"),
    ("NumPy", r"NumPy"),
    ("REST API", r"REST\s+APIs?"),
    ("Microservices", r"Microservices"),
    ("Agile", r"Agile"),
    ("Scrum", r"Scrum"),
    ("Testing", r"Testing"),
    ("Jest", r"Jest"),
    ("Cypress", r"Cypress"),
)

# Section headings, matched against a whole line
EXPERIENCE_HEADERS = (
    "experience", "work experience", "employment", "employment history",
    "professional experience", "work history",
)
EDUCATION_HEADERS = ("education", "academic background", "qualifications")
PROJECT_HEADERS = ("projects", "personal projects", "portfolio", "work samples")
OTHER_HEADERS = (
    "skills", "technical skills", "certifications", "summary",
    "professional summary", "objective", "awards", "references", "interests",
)


def _header_regex(headers) -> re.Pattern:
    alternatives = "|".join(h.replace(" ", r"\s+") for h in headers)
    return re.compile(rf"^\s*(?:{alternatives})\s*:?\s*$", re.IGNORECASE)


EXPERIENCE_HEADER_RE = _header_regex(EXPERIENCE_HEADERS)
EDUCATION_HEADER_RE = _header_regex(EDUCATION_HEADERS)
PROJECT_HEADER_RE = _header_regex(PROJECT_HEADERS)
ANY_HEADER_RE = _header_regex(
    EXPERIENCE_HEADERS + EDUCATION_HEADERS + PROJECT_HEADERS + OTHER_HEADERS
)

MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|"
    r"Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\.?"
)
DATE_TOKEN = rf"(?:{MONTH}\s+|\d{{1,2}}/)?(?:19|20)\d{{2}}"
DATE_RANGE_RE = re.compile(
    rf"(?P<start>{DATE_TOKEN})\s*[-–—]\s*(?P<end>{DATE_TOKEN}|Present|Current)",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
DATE_ONLY_RE = re.compile(
    rf"^[\s\W]*(?:(?:{MONTH}|\d{{1,2}}/)?\s*(?:19|20)\d{{2}}|present|current|expected)"
    rf"(?:[\s\W]*(?:(?:{MONTH}|\d{{1,2}}/)?\s*(?:19|20)\d{{2}}|present|current|expected))*[\s\W]*$",
    re.IGNORECASE,
)
CURRENT_RE = re.compile(r"present|current", re.IGNORECASE)

BULLETS = "•●▪◦-*–—·"

# "in <field>" tail shared by every degree pattern
_FIELD = r"(?:,?\s+[Ii][Nn]\s+(?P<field>[A-Za-z][A-Za-z&/\- ]*[A-Za-z]))?"

# Bare two-letter forms (BS, MA, ...) after a comma are state codes: "Boston, MA"
_BARE = r"(?<!,)(?<!,\s)"

# Ordered degree patterns; the first pattern that matches a line wins
DEGREE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(
        r"\b(?P<degree>Bachelor(?:'s|s)?(?:\s+of\s+(?:Science|Arts|Engineering|"
        r"Business\s+Administration|Business|Technology|Applied\s+Science|Fine\s+Arts|"
        r"Computer\s+Applications))?)" + _FIELD,
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?P<degree>B\.\s?Sc\.?|BSc|B\.\s?Tech\.?|BTech|B\.E\.|B\.S\.|B\.A\.|" + _BARE + r"(?:BS|BA|BE))"
        r"(?![A-Za-z])" + _FIELD
    ),
    re.compile(
        r"\b(?P<degree>Master(?:'s|s)?(?:\s+of\s+(?:Science|Arts|Engineering|"
        r"Business\s+Administration|Technology|Computer\s+Applications|Fine\s+Arts))?)" + _FIELD,
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?P<degree>M\.\s?Sc\.?|MSc|M\.\s?Tech\.?|MTech|M\.B\.A\.|MBA|M\.S\.|M\.A\.|" + _BARE + r"(?:MS|MA))"
        r"(?![A-Za-z])" + _FIELD
    ),
    re.compile(
        r"\b(?P<degree>Ph\.?\s?D\.?|Doctorate|Doctor\s+of\s+Philosophy)(?![A-Za-z])" + _FIELD,
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?P<degree>Associate(?:'s)?\s+(?:Degree|of\s+(?:Science|Arts|Applied\s+Science)))"
        + _FIELD,
        re.IGNORECASE,
    ),
    re.compile(r"(?<![A-Za-z])(?P<degree>A\.A\.S\.|A\.A\.|A\.S\.)" + _FIELD),
)

MAX_EDUCATION_ENTRIES = 5
MAX_PROJECT_ENTRIES = 10
EDUCATION_LOOKAHEAD = 3
MIN_DESCRIPTION_LENGTH = 20


class ResumeExtractor:
    """Extracts skills, experience, education and projects from resume text."""

    def __init__(self, skill_catalogue: Optional[tuple[tuple[str, str], ...]] = None):
        catalogue = skill_catalogue if skill_catalogue is not None else SKILL_CATALOGUE
        self._skill_patterns = tuple(
            (display, term_regex(pattern)) for display, pattern in catalogue
        )

    def extract(self, raw_text: str) -> ProfileFragment:
        """Extract a profile fragment from raw resume text."""
        text = self.normalize(raw_text or "")

        return ProfileFragment(
            skills=self.extract_skills(text),
            experience=self.extract_experience(text),
            education=self.extract_education(text),
            projects=self.extract_projects(text),
        )

    @staticmethod
    def normalize(text: str) -> str:
        """Collapse CRLF and lone CR line endings to LF."""
        return text.replace("\r\n", "\n").replace("\r", "\n")

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    def extract_skills(self, text: str) -> list[str]:
        """Return catalogue skills mentioned anywhere in the text."""
        skills = []
        seen = set()

        for display, regex in self._skill_patterns:
            if display.lower() in seen:
                continue
            if regex.search(text):
                seen.add(display.lower())
                skills.append(display)

        return skills

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def find_section(self, text: str, header_re: re.Pattern) -> Optional[list[str]]:
        """
        Return the non-empty, stripped lines of a section.

        The section starts after the first line matching ``header_re`` and
        runs to the next recognized heading or the end of the text. Returns
        None when the heading is absent.
        """
        lines = text.split("\n")

        start = None
        for i, line in enumerate(lines):
            if header_re.match(line):
                start = i + 1
                break

        if start is None:
            return None

        section = []
        for line in lines[start:]:
            if ANY_HEADER_RE.match(line):
                break
            if line.strip():
                section.append(line.strip())

        return section

    @staticmethod
    def _is_header(line: str) -> bool:
        return bool(ANY_HEADER_RE.match(line))

    @staticmethod
    def _strip_bullet(line: str) -> str:
        return line.lstrip(BULLETS).strip()

    # ------------------------------------------------------------------
    # Experience
    # ------------------------------------------------------------------

    def extract_experience(self, text: str) -> list[ExperienceEntry]:
        """
        Extract positions keyed on date-range lines.

        Without an experience heading the whole document is scanned, since
        a date range alone is enough to recognize a position.
        """
        lines = self.find_section(text, EXPERIENCE_HEADER_RE)
        if lines is None:
            lines = [
                line.strip() for line in text.split("\n")
                if line.strip() and not self._is_header(line)
            ]

        date_indexes = [i for i, line in enumerate(lines) if DATE_RANGE_RE.search(line)]
        date_set = set(date_indexes)
        experiences = []
        claimed = -1  # last line index owned by an earlier entry

        for n, index in enumerate(date_indexes):
            line = lines[index]
            date_match = DATE_RANGE_RE.search(line)
            start_date = date_match.group("start").strip()
            end_date = date_match.group("end").strip()

            remainder = (line[:date_match.start()] + " " + line[date_match.end():])
            remainder = remainder.strip(" \t|,@-–—()")

            position = None
            company = None

            if remainder:
                parts = [p.strip() for p in re.split(r"\s*[|@]\s*|\s+at\s+", remainder) if p.strip()]
                if len(parts) >= 2:
                    position, company = parts[0], parts[1]
                else:
                    company = remainder

            if position is None:
                previous = index - 1
                if previous > claimed and previous not in date_set:
                    position = lines[previous]

            body_start = index + 1
            next_index = date_indexes[n + 1] if n + 1 < len(date_indexes) else len(lines)
            if company is None and body_start < next_index:
                company = lines[body_start]
                body_start += 1

            # the line right above the next date range is that entry's title
            body_end = next_index - 1 if next_index < len(lines) else next_index
            body_end = max(body_end, body_start)

            description_parts = [
                self._strip_bullet(body_line) for body_line in lines[body_start:body_end]
                if len(body_line) > MIN_DESCRIPTION_LENGTH
            ]
            claimed = body_end - 1

            experiences.append(ExperienceEntry(
                company=company or "Company",
                position=position or "Position",
                start_date=start_date,
                description=" ".join(description_parts) or None,
                end_date=end_date,
                current=bool(CURRENT_RE.search(end_date)),
            ))

        return experiences

    # ------------------------------------------------------------------
    # Education
    # ------------------------------------------------------------------

    @staticmethod
    def _match_degree(line: str) -> Optional[re.Match]:
        for pattern in DEGREE_PATTERNS:
            match = pattern.search(line)
            if match:
                return match
        return None

    def extract_education(self, text: str) -> list[EducationEntry]:
        """Extract degrees from the education section only."""
        lines = self.find_section(text, EDUCATION_HEADER_RE)
        if not lines:
            return []

        education = []

        for i, line in enumerate(lines):
            if len(education) >= MAX_EDUCATION_ENTRIES:
                break

            match = self._match_degree(line)
            if not match:
                continue

            field = match.group("field")
            if field:
                field = re.split(r"\s+(?:from|at)\s+", field, maxsplit=1)[0].strip() or None

            years = YEAR_RE.findall(line)
            institution = None

            for candidate in lines[i + 1:i + 1 + EDUCATION_LOOKAHEAD]:
                # the next degree line starts the next entry
                if self._match_degree(candidate) or self._is_header(candidate):
                    break
                years.extend(YEAR_RE.findall(candidate))
                if institution or DATE_ONLY_RE.match(candidate):
                    continue
                institution = YEAR_RE.sub("", candidate).strip(" \t|,-–—()") or None

            if not institution:
                continue

            start_date = years[0] if len(years) >= 2 else None
            end_date = years[1] if len(years) >= 2 else (years[0] if years else None)

            education.append(EducationEntry(
                institution=institution,
                degree=match.group("degree").strip(),
                field=field,
                start_date=start_date,
                end_date=end_date,
            ))

        return education

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    @staticmethod
    def _is_project_name(lines: list[str], i: int) -> bool:
        line = lines[i]
        if not 5 <= len(line) < 100 or line[0] in BULLETS:
            return False
        return i + 1 < len(lines) and len(lines[i + 1]) > len(line)

    def extract_projects(self, text: str) -> list[ProjectEntry]:
        """Extract (name, description) pairs from the projects section."""
        lines = self.find_section(text, PROJECT_HEADER_RE)
        if not lines:
            return []

        projects = []
        i = 0

        while i < len(lines) and len(projects) < MAX_PROJECT_ENTRIES:
            if not self._is_project_name(lines, i):
                i += 1
                continue

            name = lines[i]
            description_parts = [self._strip_bullet(lines[i + 1])]
            j = i + 2
            while j < len(lines) and not self._is_project_name(lines, j):
                if len(lines[j]) > MIN_DESCRIPTION_LENGTH:
                    description_parts.append(self._strip_bullet(lines[j]))
                j += 1

            description = " ".join(p for p in description_parts if p) or None
            technologies = self.extract_skills(f"{name}\n{description or ''}")

            projects.append(ProjectEntry(
                name=name,
                description=description,
                technologies=", ".join(technologies) or None,
            ))
            i = j

        return projects


def parse_resume_text(raw_text: str) -> ProfileFragment:
    """Extract a profile fragment using the default skill catalogue."""
    return ResumeExtractor().extract(raw_text)
