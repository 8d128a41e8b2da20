"""
Resume Matcher CLI - Command line interface for the resume matching application.

Usage:
    python -m resume_matcher [command] [options]

Commands:
    upload      Upload a resume PDF and store the extracted profile
    profile     Show a stored profile
    parse       Extract a resume file without storing anything
    search      Search job sources and rank postings against a stored profile
    match       Rank postings from a JSON file against a profile file
    config      Manage configuration

Examples:
    python -m resume_matcher upload --user alice --file resume.pdf
    python -m resume_matcher search --user alice --keywords "react developer" --top 5
    python -m resume_matcher parse resume.pdf --output fragment.json
    python -m resume_matcher match --profile profile.json --jobs jobs.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from resume_matcher.core import JobMatcher, JobPosting, Profile, ResumeParser
from resume_matcher.exceptions import ResumeUploadError
from resume_matcher.service import ProfileService
from resume_matcher.utils import Config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume_matcher",
        description="Resume Matcher - Resume extraction and job compatibility scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable info logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Upload command
    upload_parser = subparsers.add_parser("upload", help="Upload a resume PDF")
    upload_parser.add_argument("--user", "-u", required=True, help="User identifier")
    upload_parser.add_argument("--file", "-f", required=True, help="Path to resume PDF")
    upload_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    # Profile command
    profile_parser = subparsers.add_parser("profile", help="Show a stored profile")
    profile_parser.add_argument("--user", "-u", required=True, help="User identifier")
    profile_parser.add_argument("--json", action="store_true", help="Print the profile as JSON")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Extract a resume without storing it")
    parse_parser.add_argument("file", help="Resume file (.pdf, .txt, .md)")
    parse_parser.add_argument("--output", "-o", help="Write the fragment to a JSON file")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search and rank jobs for a user")
    search_parser.add_argument("--user", "-u", required=True, help="User identifier")
    search_parser.add_argument("--keywords", "-k", default="", help="Search keywords")
    search_parser.add_argument("--location", "-l", default="", help="Location filter")
    search_parser.add_argument("--job-type", default="all", help="Job type (e.g. Full-time) or 'all'")
    search_parser.add_argument(
        "--experience-level", default="all",
        choices=["all", "entry", "mid", "senior"], help="Experience level filter",
    )
    search_parser.add_argument("--providers", help="Comma-separated list of job sources")
    search_parser.add_argument("--top", "-t", type=int, default=10, help="Show top N matches")
    search_parser.add_argument("--output", "-o", help="Write all matches to a JSON file")

    # Match command
    match_parser = subparsers.add_parser("match", help="Rank jobs from a file against a profile")
    match_parser.add_argument("--profile", "-p", required=True, help="Profile JSON or resume file")
    match_parser.add_argument("--jobs", "-j", required=True, help="Path to jobs file (JSON list)")
    match_parser.add_argument("--top", "-t", type=int, default=10, help="Show top N matches")
    match_parser.add_argument("--output", "-o", help="Write all matches to a JSON file")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = Config(args.config)

    commands = {
        "upload": cmd_upload,
        "profile": cmd_profile,
        "parse": cmd_parse,
        "search": cmd_search,
        "match": cmd_match,
        "config": cmd_config,
    }

    try:
        commands[args.command](args, config)

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except ResumeUploadError as e:
        print(f"\nError: {e.message}")
        if e.details:
            print(f"   Details: {e.details}")
        if e.suggestion:
            print(f"   {e.suggestion}")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


def _write_json(path: str, data) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, default=str)


def print_matches(matches, top: int) -> None:
    print(f"\n📊 Top {min(top, len(matches))} of {len(matches)} matches:\n")
    print("-" * 80)

    for i, match in enumerate(matches[:top], 1):
        job = match.job
        reasons = match.match_reasons
        salary = f" | {job.salary}" if job.salary else ""

        print(f"\n{i}. {job.title} @ {job.company}")
        print(f"   {job.location} | {job.job_type}{salary}")
        print(f"   📈 Compatibility: {match.compatibility_score}%")
        if reasons.skills_match:
            print(f"   ✅ Matched Skills: {', '.join(reasons.skills_match)}")
        if reasons.missing_skills:
            print(f"   ❌ Missing Skills: {', '.join(reasons.missing_skills)}")
        print(f"   🧭 {reasons.experience_match}")
        print(f"   🎓 {reasons.education_match}")
        if job.url:
            print(f"   🔗 {job.url}")


def cmd_upload(args, config: Config):
    """Execute upload command."""
    print("📄 Uploading resume...")

    service = ProfileService(config)
    result = service.upload_resume(args.user, args.file)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print(f"\n✅ Resume uploaded and parsed for {args.user}")
    print(f"   Skills ({len(result.skills)}): {', '.join(result.skills)}")
    print(f"   Experience: {result.experience_count} | Education: {result.education_count} "
          f"| Projects: {result.projects_count}")


def cmd_profile(args, config: Config):
    """Execute profile command."""
    service = ProfileService(config)
    profile = service.get_profile(args.user)

    if args.json:
        print(json.dumps(profile.to_dict(), indent=2))
        return

    print(f"\n📋 Profile: {profile.user_id}\n")
    print(f"Resume: {profile.resume_path or '(none)'}")
    print(f"Updated: {profile.updated_at:%Y-%m-%d %H:%M}")
    print(f"\nSkills ({len(profile.skills)}): {', '.join(profile.skill_names)}")

    print(f"\nExperience ({len(profile.experience)} positions):")
    for exp in profile.experience:
        end = exp.end_date or ("Present" if exp.current else "?")
        print(f"  - {exp.position} @ {exp.company} ({exp.start_date} - {end})")

    print(f"\nEducation ({len(profile.education)}):")
    for edu in profile.education:
        field = f" in {edu.field}" if edu.field else ""
        print(f"  - {edu.degree}{field}, {edu.institution}")

    print(f"\nProjects ({len(profile.projects)}):")
    for project in profile.projects:
        print(f"  - {project.name}")


def cmd_parse(args, config: Config):
    """Execute parse command."""
    fragment = ResumeParser().parse_file(args.file)
    data = fragment.to_dict()

    if args.output:
        _write_json(args.output, data)
        print(f"💾 Saved extraction to {args.output}")
    else:
        print(json.dumps(data, indent=2))

    if not fragment.has_signal:
        print("\n⚠️  No skills or experience found; try a resume with clearer section headings.")


def cmd_search(args, config: Config):
    """Execute search command."""
    print("🔍 Searching for jobs...")

    sources = None
    if args.providers:
        sources = [p.strip() for p in args.providers.split(",") if p.strip()]

    service = ProfileService(config)
    matches = service.search_jobs(
        args.user,
        keywords=args.keywords,
        location=args.location,
        job_type=args.job_type,
        experience_level=args.experience_level,
        sources=sources,
    )

    if not matches:
        print("\nNo jobs found.")
        return

    print_matches(matches, args.top)

    if args.output:
        _write_json(args.output, {"jobs": [m.to_dict() for m in matches], "count": len(matches)})
        print(f"\n💾 Saved {len(matches)} matches to {args.output}")


def _load_profile(path: str):
    """Load a stored profile JSON, or extract a resume file on the fly."""
    if Path(path).suffix.lower() == ".json":
        with open(path, 'r', encoding='utf-8') as f:
            return Profile.from_dict(json.load(f))
    return ResumeParser().parse_file(path)


def cmd_match(args, config: Config):
    """Execute match command."""
    print("🎯 Matching profile against jobs...")

    profile = _load_profile(args.profile)

    with open(args.jobs, 'r', encoding='utf-8') as f:
        jobs_data = json.load(f)
    if isinstance(jobs_data, dict):
        jobs_data = jobs_data.get("jobs", [])
    jobs = [JobPosting.from_dict(j) for j in jobs_data]

    print(f"   Jobs to match: {len(jobs)}")

    matches = JobMatcher(profile).rank_jobs(jobs)
    print_matches(matches, args.top)

    if args.output:
        _write_json(args.output, {"jobs": [m.to_dict() for m in matches], "count": len(matches)})
        print(f"\n💾 Saved {len(matches)} matches to {args.output}")


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        config.save()
        print(f"✅ Created config at: {config.config_path}")

    elif args.show:
        print("\n📋 Current Configuration\n")
        config.print_config()

    elif args.set:
        key, value = args.set
        # Try to parse as JSON for complex values
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass

        config.set(key, value)
        config.save()
        print(f"✅ Set {key} = {value}")

    else:
        print("Use --show, --set, or --init")


if __name__ == "__main__":
    main()
