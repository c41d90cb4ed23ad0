"""nuspecread - Package manifest (.nuspec) metadata reader

    Reads a manifest, runs every metadata resolver and reports the result as
    JSON or a plain text summary.

    Returns:
        int: Exit code
"""
import sys
import logging
import json
import xml.etree.ElementTree as ET

from constants import ExitCodes, Constants, OutputFormats
from common.logging_utils import Timer, configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import find_config_file, load_config, resolve_settings
from frameworks import FrameworkParseError
from nuspec import NuspecReader, PackagingException

logger = logging.getLogger(__name__)


def _framework_name(framework):
    return framework.get_short_folder_name()


def _range_text(version_range):
    return None if version_range is None else version_range.to_normalized_string()


def build_report(reader, strict=False):
    """Run every resolver on the reader and collect a JSON-ready dict.

    Args:
        reader (NuspecReader): Reader for the manifest.
        strict (bool): Reject dependencies with a missing or invalid version range.

    Raises:
        PackagingException: If the manifest holds an entry that cannot be interpreted.

    Returns:
        dict: Report of the manifest metadata.
    """
    identity = reader.get_identity()
    license_metadata = reader.get_license_metadata()
    repository = reader.get_repository_metadata()

    report = {
        "id": identity.id,
        "version": None if identity.version is None else identity.version.to_normalized_string(),
        "title": reader.get_title(),
        "authors": reader.get_authors(),
        "owners": reader.get_owners(),
        "description": reader.get_description(),
        "summary": reader.get_summary(),
        "releaseNotes": reader.get_release_notes(),
        "tags": reader.get_tags(),
        "language": reader.get_language(),
        "copyright": reader.get_copyright(),
        "projectUrl": reader.get_project_url(),
        "iconUrl": reader.get_icon_url(),
        "licenseUrl": reader.get_license_url(),
        "requireLicenseAcceptance": reader.get_require_license_acceptance(),
        "developmentDependency": reader.get_development_dependency(),
        "serviceable": reader.is_serviceable(),
        "minClientVersion": _optional_str(reader.get_min_client_version()),
        "packageTypes": [
            {"name": package_type.name, "version": str(package_type.version)}
            for package_type in reader.get_package_types()
        ],
        "repository": {
            "type": repository.type,
            "url": repository.url,
            "branch": repository.branch,
            "commit": repository.commit,
        },
        "dependencyGroups": [
            {
                "targetFramework": _framework_name(group.target_framework),
                "packages": [
                    {
                        "id": dependency.id,
                        "versionRange": _range_text(dependency.version_range),
                        "include": list(dependency.include),
                        "exclude": list(dependency.exclude),
                    }
                    for dependency in group.packages
                ],
            }
            for group in reader.get_dependency_groups(use_strict_version_check=strict)
        ],
        "referenceGroups": [
            {"targetFramework": _framework_name(group.target_framework), "items": list(group.items)}
            for group in reader.get_reference_groups()
        ],
        "frameworkAssemblyGroups": [
            {"targetFramework": _framework_name(group.target_framework), "items": list(group.items)}
            for group in reader.get_framework_assembly_groups()
        ],
        "contentFiles": [
            {
                "include": entry.include,
                "exclude": entry.exclude,
                "buildAction": entry.build_action,
                "copyToOutput": entry.copy_to_output,
                "flatten": entry.flatten,
            }
            for entry in reader.get_content_files()
        ],
        "license": None,
    }

    if license_metadata is not None:
        report["license"] = {
            "type": license_metadata.type.value,
            "license": license_metadata.license,
            "version": str(license_metadata.version),
            "expressionEvaluated": license_metadata.is_expression_evaluated,
            "nonStandardLicenses": list(license_metadata.non_standard_licenses),
            "licenseUrl": license_metadata.license_url,
        }
    return report


def _optional_str(value):
    return None if value is None else str(value)


def format_text(report):
    """Render a report as a human readable summary.

    Args:
        report (dict): Report from build_report.

    Returns:
        str: Text summary.
    """
    lines = [f"{report['id']} {report['version'] or ''}".rstrip()]
    if report.get("title"):
        lines.append(f"  Title: {report['title']}")
    if report.get("authors"):
        lines.append(f"  Authors: {report['authors']}")
    if report.get("license"):
        lic = report["license"]
        lines.append(f"  License ({lic['type']}, v{lic['version']}): {lic['license']}")

    lines.append("Dependencies:")
    for group in report["dependencyGroups"]:
        lines.append(f"  [{group['targetFramework']}]")
        for dependency in group["packages"]:
            lines.append(f"    {dependency['id']} {dependency['versionRange'] or '(any)'}")
    for title, key in (("References:", "referenceGroups"), ("Framework assemblies:", "frameworkAssemblyGroups")):
        lines.append(title)
        for group in report[key]:
            lines.append(f"  [{group['targetFramework']}] {', '.join(group['items'])}")
    if report["contentFiles"]:
        lines.append("Content files:")
        for entry in report["contentFiles"]:
            lines.append(f"  {entry['include']}")
    return "\n".join(lines) + "\n"


def render(report, fmt):
    if fmt == OutputFormats.TEXT.value:
        return format_text(report)
    return json.dumps(report, indent=4) + "\n"


def export_report(report, path, fmt):
    """Writes the report to a file.

    Args:
        report (dict): Report from build_report.
        path (str): File path to export to.
        fmt (str): Output format (json or text).
    """
    try:
        with open(path, 'w', encoding='utf-8') as file:
            file.write(render(report, fmt))
        logging.info("Report has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("Report couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def _infer_format(args, settings):
    if getattr(args, "OUTPUT_FORMAT", None):
        return args.OUTPUT_FORMAT.lower()
    if getattr(args, "OUTPUT", None):
        lower = args.OUTPUT.lower()
        if lower.endswith(".json"):
            return OutputFormats.JSON.value
        if lower.endswith(".txt"):
            return OutputFormats.TEXT.value
    return settings["output_format"]


def _setup_log_file(path):
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    logging.getLogger().addHandler(handler)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)

    config = load_config(find_config_file(getattr(args, "CONFIG", None)))
    settings = resolve_settings(args, config)

    configure_logging(settings["log_level"])
    if getattr(args, "LOG_FILE", None):
        try:
            _setup_log_file(args.LOG_FILE)
        except OSError as e:
            logging.error("Log file couldn't be opened: %s", e)
            sys.exit(ExitCodes.FILE_ERROR.value)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main",
                                target=args.INPUT, outcome="strict" if settings["strict"] else "lenient")
        )

    if not args.INPUT.lower().endswith(Constants.NUSPEC_EXTENSION):
        logging.warning("Input file does not have a %s extension: %s", Constants.NUSPEC_EXTENSION, args.INPUT)

    try:
        reader = NuspecReader.from_file(args.INPUT)
    except FileNotFoundError as e:
        logging.error("File not found: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except OSError as e:
        logging.error("IO error: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except ET.ParseError as e:
        logging.error("Manifest is not well-formed XML: %s", e)
        sys.exit(ExitCodes.INVALID_MANIFEST.value)
    except PackagingException as e:
        logging.error("Invalid manifest: %s", e)
        sys.exit(ExitCodes.INVALID_MANIFEST.value)

    try:
        with Timer() as timer:
            report = build_report(reader, strict=settings["strict"])
    except (PackagingException, FrameworkParseError) as e:
        logging.error("Invalid manifest: %s", e)
        sys.exit(ExitCodes.INVALID_MANIFEST.value)

    logging.info("Manifest read: %s %s", report["id"], report["version"] or "")
    if is_debug_enabled(logger):
        logger.debug(
            "Resolved manifest metadata",
            extra=extra_context(event="function_exit", component="cli", action="build_report",
                                outcome="success", duration_ms=round(timer.duration_ms, 3),
                                count=len(report["dependencyGroups"]))
        )

    fmt = _infer_format(args, settings)
    if getattr(args, "OUTPUT", None):
        export_report(report, args.OUTPUT, fmt)
    elif not args.QUIET:
        sys.stdout.write(render(report, fmt))

    sys.exit(ExitCodes.SUCCESS.value)

if __name__ == "__main__":
    main()
