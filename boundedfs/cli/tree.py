from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from boundedfs.bounded_path import BoundedPath
from boundedfs.security.errors import BoundedPathError
from boundedfs.security.visibility import always_visible, hide_dotfiles


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="boundedfs-tree",
        description="Print the directory tree below ROOT, or remove a subdirectory of it.",
    )
    ap.add_argument("root", help="Existing directory acting as the sandbox root")
    ap.add_argument("--remove", metavar="SUBDIR", help="Recursively remove SUBDIR (relative to ROOT)")
    ap.add_argument("--json", action="store_true", help="Emit the tree as a JSON object")
    ap.add_argument("--hide-dotfiles", action="store_true", help="Skip entries starting with '.'")
    ap.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories (each real directory is visited once)",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        root = BoundedPath(
            args.root,
            visibility=hide_dotfiles if args.hide_dotfiles else always_visible,
            follow_symlinks=args.follow_symlinks,
        )
        if args.remove:
            target = root.append(args.remove)
            target.rm_dir()
            print(f"removed {target.get_path_clean()}")
            return 0

        tree = root.get_directory_tree()
    except BoundedPathError as exc:
        print(f"error [{exc.kind.value}]: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(tree, indent=2))
    else:
        for label in tree.values():
            print(label)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
