import sys, argparse
from pathlib import Path

root_path = str(Path(__file__).parent.parent.absolute())
if root_path not in sys.path: sys.path.insert(0, root_path)

from treedump.util.logger import setup_app_logger, set_console_level, crash_handler
from treedump.core.report import generate_report, save_report
import treedump.util.config as config

# core modules log under their own names; route them through the app handlers
_LOGGER_NAMES = ("MAIN", "REPORT", "TREE", "CONTENTS", "CONFIG")


def build_parser(defaults):
    p = argparse.ArgumentParser(
        prog="treedump",
        description="Write a directory tree plus the contents of its text files as one report.")
    p.add_argument("root", nargs="?", default=defaults.get("last_folder"),
                   help="directory to process (default: last folder saved in settings)")
    p.add_argument("-e", "--extensions", default=None,
                   help="comma-separated extensions to include, no dots; empty string allows all "
                        f"(default: {', '.join(defaults['allowed_extensions']) or 'all'})")
    p.add_argument("-x", "--exclude", default=None,
                   help="comma-separated folder patterns to skip "
                        f"(default: {', '.join(defaults['excluded_folders']) or 'none'})")
    p.add_argument("--mode", choices=["substring", "segment"], default=defaults["exclusion_mode"],
                   help="match exclusions anywhere in the path or as whole path segments")
    p.add_argument("--full-tree", action=argparse.BooleanOptionalAction, default=None,
                   help="show files of every extension in the tree section; "
                        "--no-full-tree filters the tree like the contents")
    p.add_argument("-o", "--output", help="write the report to this file instead of stdout")
    p.add_argument("--save-settings", action="store_true",
                   help="remember these options and the root folder for next time")
    p.add_argument("-v", "--verbose", action="store_true", help="debug output on stderr")
    return p


def main(argv=None):
    loggers = [setup_app_logger(n) for n in _LOGGER_NAMES]
    log = loggers[0]
    sys.excepthook = crash_handler

    settings = config.load()
    args = build_parser(settings).parse_args(argv)
    if args.verbose:
        for lg in loggers: set_console_level(lg, "DEBUG")

    if not args.root:
        log.error("No root folder given and none saved in %s", config.FILE)
        return 2
    if args.extensions is not None:
        settings["allowed_extensions"] = config.parse_list(args.extensions)
    if args.exclude is not None:
        settings["excluded_folders"] = config.parse_list(args.exclude)
    settings["exclusion_mode"] = args.mode
    if args.full_tree is not None:
        settings["filter_tree_by_extension"] = not args.full_tree
    settings["last_folder"] = str(Path(args.root).resolve())

    try:
        cfg = config.build_configuration(settings["last_folder"], settings)
        log.debug("Configuration: %s", cfg)
        report = generate_report(cfg)
    except ValueError as e:  # InvalidRootError or a malformed settings value
        log.error("%s", e)
        return 2

    if args.save_settings:
        config.save(settings)
        log.info("Settings saved to %s", config.FILE)

    if args.output:
        try:
            save_report(report, args.output)
        except OSError:
            log.exception("Failed to write report to %s", args.output)
            return 1
    else:
        sys.stdout.write(report)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
