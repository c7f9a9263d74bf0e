import argparse
import json
import sys
from typing import List, Optional

from video_lab.config_manager import ConfigManager
from video_lab.engine import VideoPackageGenerator
from video_lab.errors import InvalidSeedError
from video_lab.planning.models import Brief
from video_lab.utils.logger import setup_logger


def _add_brief_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--topic", default="", help="Central topic")
    parser.add_argument("--audience", default="", help="Target audience")
    parser.add_argument("--length", default="", help="Desired runtime, e.g. '12 minutes'")
    parser.add_argument("--tone", default="", help="Voice & tone, e.g. 'High-energy'")
    parser.add_argument("--style", default="", help="Production style, e.g. 'Documentary hybrid'")
    parser.add_argument("--seed", type=int, default=1, help="Creative seed (integer >= 1)")
    parser.add_argument("--config", default="config/settings.yaml", help="Path to settings.yaml")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Video Lab production package generator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate a production package as JSON")
    _add_brief_arguments(generate_parser)

    shuffle_parser = subparsers.add_parser("shuffle", help="Re-roll the seed and print the next packages")
    _add_brief_arguments(shuffle_parser)
    shuffle_parser.add_argument("--count", type=int, default=1, help="How many successive seeds to print")

    settings_parser = subparsers.add_parser("settings", help="Print the effective configuration")
    settings_parser.add_argument("--config", default="config/settings.yaml", help="Path to settings.yaml")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigManager(args.config)
    except Exception as e:
        print(f"Config Error: {e}")
        sys.exit(1)

    setup_logger(
        log_dir=config.paths.log_dir,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        level=config.logging.level,
        file_stem=config.logging.file_stem,
    )

    if args.command == "settings":
        print(config.config.model_dump_json(indent=2))
        return

    brief = Brief(
        topic=args.topic,
        target_audience=args.audience,
        desired_length=args.length,
        tone=args.tone,
        production_style=args.style,
    )
    generator = VideoPackageGenerator(config)

    try:
        if args.command == "generate":
            package = generator.generate(brief, args.seed)
            print(package.model_dump_json(indent=2, by_alias=True))
        elif args.command == "shuffle":
            seed = args.seed
            results = []
            for _ in range(max(args.count, 1)):
                seed, package = generator.shuffle(brief, seed)
                results.append({"seed": seed, "package": package.model_dump(mode="json", by_alias=True)})
            print(json.dumps(results, indent=2))
    except InvalidSeedError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
