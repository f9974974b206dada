#!/usr/bin/env python3
"""
Tab Trace Analyzer - Command Line Facade
"""

import json
import logging
import re
import sys

from tab_trace import TraceConfig, TraceOfTabError, compute_trace_of_tab
from tab_trace.processors import TraceFileProcessor
from tab_trace.web import prepare_results


def main():
    import argparse
    parser = argparse.ArgumentParser(
        description='Extract page lifecycle timings of the traced tab from a Chrome trace JSON file.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analyze_trace.py trace.json
  python analyze_trace.py trace.json -o timings.json
  python analyze_trace.py trace.json --include-events -o timings.json
  python analyze_trace.py trace.json --verbose
        """
    )
    parser.add_argument('input_file', help='Path to the trace JSON file')
    parser.add_argument('-o', '--output', dest='output_file', default=None, help='Output JSON file')
    parser.add_argument('--include-events', action='store_true',
                       help='Include main-thread events in the JSON output')
    parser.add_argument('--navigation-url-pattern', default=None,
                       help='Regex a navigationStart document URL must match (default: http(s) and chrome pages)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    config = TraceConfig()
    if args.navigation_url_pattern:
        try:
            re.compile(args.navigation_url_pattern)
        except re.error as e:
            print(f"Error: Invalid --navigation-url-pattern: {e}")
            sys.exit(1)
        config = TraceConfig(acceptable_navigation_url=args.navigation_url_pattern)

    try:
        print(f"\nConfiguration:")
        print(f"  Input file: {args.input_file}")
        print(f"  Navigation URL pattern: {config.acceptable_navigation_url}\n")

        trace = TraceFileProcessor().process_file(args.input_file)
        trace_of_tab = compute_trace_of_tab(trace, config=config)
        results = prepare_results(trace_of_tab, include_events=args.include_events)

        print("Timings since navigationStart:")
        for marker, formatted in results['timings_formatted'].items():
            print(f"  {marker:<22} {formatted}")
        if trace_of_tab.fmp_fell_back:
            print("  (firstMeaningfulPaint derived from the last candidate)")
        print(f"\nProcess events: {results['process_event_count']}")
        print(f"Main thread events: {results['main_thread_event_count']}")

        if args.output_file:
            with open(args.output_file, 'w') as f:
                json.dump(results, f, indent=2)
            print(f"\nResults written to {args.output_file}")

        print(f"\n✓ Analysis complete!")
    except FileNotFoundError:
        print(f"Error: File '{args.input_file}' not found.")
        sys.exit(1)
    except TraceOfTabError as e:
        print(f"Error [{e.code}]: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
