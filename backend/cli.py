import argparse
import json
import sys

from pydantic import ValidationError

from backend.core.exercise_grouping import (
    group_exercises,
    group_exercises_with_separate_supersets,
)
from backend.core.progression_templates import generate_progression_template
from domain.models import ExerciseInstance, ProgressionOptions

# CLI flag -> ProgressionOptions field
OPTION_FLAGS = (
    "deload_frequency",
    "deload_factor",
    "amplitude",
    "period",
    "intensity_delta",
    "volume_delta",
    "target_volume",
    "progression_rate",
)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Group session exercises or generate progression templates"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    group_parser = subparsers.add_parser("group", help="Group exercises from a JSON file")
    group_parser.add_argument("input", help="Input JSON file (list of exercises or {\"exercises\": [...]})")
    group_parser.add_argument(
        "--separate-supersets",
        action="store_true",
        help="Keep supersets as their own groups",
    )
    group_parser.add_argument("-o", "--output", help="Output JSON file path (default: stdout)")

    template_parser = subparsers.add_parser("template", help="Generate a progression template")
    template_parser.add_argument("model", help="Progression model (linear, undulating, accumulation, transmutation, realization)")
    template_parser.add_argument("duration", type=int, help="Number of weeks")
    template_parser.add_argument("--base-intensity", type=float, default=5)
    template_parser.add_argument("--base-volume", type=float, default=5)
    template_parser.add_argument("--deload-frequency", type=int)
    template_parser.add_argument("--deload-factor", type=float)
    template_parser.add_argument("--amplitude", type=float)
    template_parser.add_argument("--period", type=float)
    template_parser.add_argument("--intensity-delta", type=float)
    template_parser.add_argument("--volume-delta", type=float)
    template_parser.add_argument("--target-volume", type=float)
    template_parser.add_argument("--progression-rate", type=float)
    template_parser.add_argument("-o", "--output", help="Output JSON file path (default: stdout)")

    return parser


def run_group(args):
    with open(args.input, 'r') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("exercises", [])
    if not isinstance(data, list):
        raise ValueError(
            f"Expected a list of exercises, got {type(data).__name__}"
        )
    exercises = [ExerciseInstance.model_validate(item) for item in data]

    if args.separate_supersets:
        groups = group_exercises_with_separate_supersets(exercises)
    else:
        groups = group_exercises(exercises)

    return [group.model_dump(mode="json") for group in groups]


def run_template(args):
    # Only pass options the user actually set so model defaults apply
    option_values = {
        name: getattr(args, name)
        for name in OPTION_FLAGS
        if getattr(args, name) is not None
    }
    options = ProgressionOptions(**option_values)

    template = generate_progression_template(
        args.model,
        args.duration,
        args.base_intensity,
        args.base_volume,
        options,
    )
    return [week.model_dump() for week in template]


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "group":
            result = run_group(args)
        else:
            result = run_template(args)

        output = json.dumps(result, indent=2)

        # Output result
        if args.output:
            with open(args.output, 'w') as f:
                f.write(output)
        else:
            print(output)

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: Invalid input: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
