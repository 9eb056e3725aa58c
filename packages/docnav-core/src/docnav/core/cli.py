import argparse
import json
import logging
import sys

from docnav.core.category_metadata import validate_category_tree
from docnav.core.docs_source import load_docs
from docnav.core.generator import generate_sidebar_slice
from docnav.core.items import SidebarItemCategory
from docnav.core.runtime.settings import load_settings


def _print_outline(items, depth: int = 0) -> None:
    pad = "  " * depth
    for it in items:
        if isinstance(it, SidebarItemCategory):
            state = "collapsed" if it.collapsed else "expanded"
            print(f"{pad}+ {it.label} ({state})")
            _print_outline(it.items, depth + 1)
        else:
            label = f" [{it.label}]" if it.label else ""
            print(f"{pad}- {it.id}{label}")


def main(argv=None) -> int:
    argv = argv or sys.argv[1:]
    parser = argparse.ArgumentParser(prog="docnav", description="docnav sidebar generator CLI")
    sp = parser.add_subparsers(dest="cmd", required=True)

    genp = sp.add_parser("generate", help="Generate an autogenerated sidebar slice")
    genp.add_argument("--content-path", required=True, help="Docs content root directory")
    genp.add_argument("--dir", default=".", help="Autogenerated dir, relative to the content root")
    genp.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    collapse = genp.add_mutually_exclusive_group()
    collapse.add_argument("--collapsed", dest="collapsed", action="store_true", default=None, help="Collapse categories by default")
    collapse.add_argument("--expanded", dest="collapsed", action="store_false", help="Expand categories by default")
    genp.set_defaults(collapsed=None)

    valp = sp.add_parser("validate", help="Validate every _category_ metadata file")
    valp.add_argument("--content-path", required=True, help="Docs content root directory")
    valp.add_argument("--json", action="store_true", help="Output machine-readable JSON")

    args = parser.parse_args(argv)
    overrides = {}
    if getattr(args, "collapsed", None) is not None:
        overrides["category_collapsed_default"] = bool(args.collapsed)
    settings = load_settings(overrides)
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s - %(message)s")

    if args.cmd == "generate":
        docs = load_docs(args.content_path, settings=settings)
        items = generate_sidebar_slice(args.dir, docs, content_path=args.content_path, settings=settings)
        if args.json:
            print(json.dumps([it.as_dict() for it in items], ensure_ascii=False))
        else:
            _print_outline(items)
        return 0

    if args.cmd == "validate":
        reports = validate_category_tree(args.content_path)
        ok = all(r.ok for r in reports)
        if args.json:
            print(json.dumps({"ok": ok, "files": [r.as_dict() for r in reports]}, ensure_ascii=False))
        else:
            for r in reports:
                if r.ok:
                    print(f"OK: {r.path}")
                else:
                    print(f"INVALID: {r.path}")
                    for i in r.issues:
                        print(f"- {i.loc}: {i.code} - {i.msg}")
        return 0 if ok else 2

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
