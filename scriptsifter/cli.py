#!/usr/bin/env python3
"""
ScriptSifter CLI - quick reconnaissance of script source
Extracts URLs, domains, paths and secret-like strings from a file or URL.
"""

import sys

from colorama import init, Fore, Style
init(autoreset=True)

from scriptsifter import __version__
from scriptsifter.core.config import get_default_config
from scriptsifter.core.logger import set_verbose, set_silent
from scriptsifter.models import ScanRecord
from scriptsifter.output import JSONExporter, build_text_report
from scriptsifter.pipelines.scan import ScanRunner
from scriptsifter.services.datastore import DataStore


def print_banner():
    print(f"""
{Fore.CYAN}╔══════════════════════════════════════════════╗
║   {Fore.WHITE}ScriptSifter{Fore.CYAN} v{__version__:<8}                        ║
║   {Fore.YELLOW}URLs, domains, paths and secrets in scripts{Fore.CYAN}  ║
╚══════════════════════════════════════════════╝{Style.RESET_ALL}
""", flush=True)


def show_help():
    print(f"""
{Fore.CYAN}Usage:{Style.RESET_ALL}
    scriptsifter <command> <target> [options]

{Fore.CYAN}Commands:{Style.RESET_ALL}
    {Fore.GREEN}file{Style.RESET_ALL}      Analyze a local script file
    {Fore.GREEN}url{Style.RESET_ALL}       Fetch and analyze a remote script
    {Fore.GREEN}status{Style.RESET_ALL}    List saved scans
    {Fore.GREEN}report{Style.RESET_ALL}    Print the text report of a saved scan

{Fore.CYAN}Options:{Style.RESET_ALL}
    -o, --output <dir>    Output directory (default: scan_output)
    -v, --verbose         Verbose output
    -s, --silent          Silent mode (report only)
    --json                Print results as JSON instead of the text report
    --no-save             Do not write results to the output directory

{Fore.CYAN}Examples:{Style.RESET_ALL}
    scriptsifter file bundle.js
    scriptsifter url https://example.com/static/app.js --json
    scriptsifter report 20240101_120000_ab12cd34
""")


def parse_args(args):
    options = {
        'output': None,
        'verbose': False,
        'silent': False,
        'json': False,
        'save': True,
    }

    positional = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ['-o', '--output']:
            if i + 1 < len(args):
                options['output'] = args[i + 1]
                i += 2
                continue
        elif arg in ['-v', '--verbose']:
            options['verbose'] = True
        elif arg in ['-s', '--silent']:
            options['silent'] = True
        elif arg == '--json':
            options['json'] = True
        elif arg == '--no-save':
            options['save'] = False
        elif arg in ['-h', '--help']:
            return 'help', [], options
        elif not arg.startswith('-'):
            positional.append(arg)
        i += 1

    command = positional[0] if positional else None
    targets = positional[1:] if len(positional) > 1 else []

    return command, targets, options


def _build_runner(options) -> ScanRunner:
    if options['verbose']:
        set_verbose(True)
    elif options['silent']:
        set_silent(True)

    config = get_default_config()
    if options['output']:
        config.output_dir = options['output']
    config.save_results = options['save']

    return ScanRunner(config, silent_mode=options['silent'])


def print_record(record: ScanRecord, options):
    if not record.success:
        print(f"{Fore.RED}[-] {record.error}{Style.RESET_ALL}")
        return

    result = record.result

    if options['json']:
        print(JSONExporter().to_json(result))
        return

    if not options['silent']:
        print(f"\n{Fore.GREEN}[+] Analysis complete: {record.source}{Style.RESET_ALL}")
        for name, count in result.counts().items():
            color = Fore.RED if name == 'secrets' and count else Fore.WHITE
            print(f"    {color}{name.capitalize()}: {count}{Style.RESET_ALL}")
        print()

    print(build_text_report(result), end='')


def run_scan(command, target, options) -> int:
    if not options['silent'] and not options['json']:
        print_banner()

    runner = _build_runner(options)

    try:
        if command == 'file':
            record = runner.run_file(target)
        else:
            record = runner.run_url(target)
    except KeyboardInterrupt:
        print(f"\n{Fore.YELLOW}[!] Scan interrupted{Style.RESET_ALL}")
        return 1

    print_record(record, options)

    if record.success and options['save'] and not options['silent'] and not options['json']:
        print(f"\n  {Fore.CYAN}Scan ID: {record.scan_id}{Style.RESET_ALL}")

    return 0 if record.success else 1


def show_status(options) -> int:
    print_banner()

    datastore = DataStore(options['output'] or get_default_config().output_dir)
    records = datastore.get_all_scans()

    if not records:
        print(f"\n{Fore.YELLOW}No scans found in {datastore.base_dir}{Style.RESET_ALL}")
        return 0

    print(f"\n{Fore.CYAN}Saved scans in {datastore.base_dir}:{Style.RESET_ALL}\n")

    for record in records:
        icon = f"{Fore.GREEN}✓{Style.RESET_ALL}" if record.success else f"{Fore.RED}✗{Style.RESET_ALL}"
        print(f"  {icon} {Fore.WHITE}{record.scan_id}{Style.RESET_ALL}  [{record.source_type.value}] {record.source}")
        if record.result:
            counts = record.result.counts()
            print(f"      secrets: {counts['secrets']}  urls: {counts['urls']}  "
                  f"domains: {counts['domains']}  paths: {counts['paths']}")
        elif record.error:
            print(f"      {Fore.RED}{record.error}{Style.RESET_ALL}")

    return 0


def show_report(scan_id, options) -> int:
    datastore = DataStore(options['output'] or get_default_config().output_dir)
    record = datastore.load_scan(scan_id)

    if record is None:
        print(f"{Fore.RED}[-] Scan not found: {scan_id}{Style.RESET_ALL}")
        return 1

    print_record(record, {**options, 'silent': True})
    return 0 if record.success else 1


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print_banner()
        show_help()
        return 0

    command, targets, options = parse_args(args)

    if command == 'help':
        print_banner()
        show_help()
        return 0

    if command in ('file', 'url', 'report'):
        if not targets:
            print(f"{Fore.RED}[-] Error: No target specified{Style.RESET_ALL}")
            print(f"Usage: scriptsifter {command} <target>")
            return 1
        if command == 'report':
            return show_report(targets[0], options)
        return run_scan(command, targets[0], options)

    if command == 'status':
        return show_status(options)

    print(f"{Fore.RED}[-] Unknown command: {command}{Style.RESET_ALL}")
    show_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
