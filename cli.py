import argparse
import time

import requests
from colorama import Fore, Style

import utils
from utils import log_with_time, vlog, PRINT_LOCK
from wordlist import load_dawg


def print_tree(dawg):
    """Thread-safe, indented printing of the whole tree. Terminal nodes are
    green and marked with ``*``; inner nodes are dimmed."""
    with PRINT_LOCK:
        root = Style.DIM + '·' + Style.RESET_ALL
        if '' in dawg:
            root += Fore.GREEN + ' *' + Style.RESET_ALL
        lines = [root]
        _render(dawg, lines)
        print('\n'.join(lines))


def _render(dawg, lines):
    # (path, is_terminal); children pushed in reverse to pop in order
    stack = [(ch, term) for ch, term in reversed(list(dawg.iter_extensions('')))]
    while stack:
        path, term = stack.pop()
        indent = '  ' * len(path)
        ch = path[-1]
        if term:
            lines.append(f"{indent}{Fore.GREEN}{ch} *{Style.RESET_ALL}")
        else:
            lines.append(f"{indent}{Style.DIM}{ch}{Style.RESET_ALL}")
        for nxt, nxt_term in reversed(list(dawg.iter_extensions(path))):
            stack.append((path + nxt, nxt_term))


def print_words(dawg):
    for word in dawg.words():
        print(word)


def print_contains(dawg, terms):
    for term in terms:
        if dawg.contains(term):
            print(f"{term}: " + Fore.GREEN + "yes" + Style.RESET_ALL)
        else:
            print(f"{term}: " + Fore.RED + "no" + Style.RESET_ALL)


def print_prefixes(dawg, terms):
    for term in terms:
        found = dawg.prefixes(term)
        if found:
            print(f"{term}: " + Fore.GREEN + ", ".join(found) + Style.RESET_ALL)
        else:
            print(f"{term}: -")


def print_stats(dawg):
    print(f"Words: {len(dawg)}")
    print(f"Nodes: {dawg.node_count}")


def build_parser():
    parser = argparse.ArgumentParser(description="DAWG prefix dictionary")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--words", type=str, default=None, help="Path to a word list, one word per line")
    source.add_argument("--url", type=str, default=None, help=f"URL of a word list to download (default: {utils.DICT_URL}, an uppercase list; pair it with --upper)")
    parser.add_argument("--min-length", type=int, default=1, help="Skip words shorter than this (default: 1)")
    parser.add_argument("--max-length", type=int, default=None, help="Skip words longer than this")
    parser.add_argument("--upper", action="store_true", help="Upper-case words before inserting")
    parser.add_argument("--alpha-only", action="store_true", help="Keep only purely alphabetic words")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("command", choices=["contains", "prefixes", "tree", "words", "stats"], help="Query to run")
    parser.add_argument("terms", nargs="*", help="Words to query")
    return parser


def run_cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    try:
        dawg, _ = load_dawg(
            path=args.words,
            url=args.url,
            min_length=args.min_length,
            max_length=args.max_length,
            upper=args.upper,
            alpha_only=args.alpha_only,
        )
    except FileNotFoundError:
        log_with_time(f"Could not find word list: {args.words}", color=Fore.RED)
        return 1
    except (OSError, requests.RequestException, ValueError) as e:
        log_with_time(f"Error loading word list: {e}", color=Fore.RED)
        return 1

    terms = [t.upper() for t in args.terms] if args.upper else args.terms

    t0 = time.time()
    if args.command == "contains":
        print_contains(dawg, terms)
    elif args.command == "prefixes":
        print_prefixes(dawg, terms)
    elif args.command == "tree":
        print_tree(dawg)
    elif args.command == "words":
        print_words(dawg)
    else:
        print_stats(dawg)
    vlog(f"{args.command} answered for {len(terms)} term(s)", t0)
    return 0
