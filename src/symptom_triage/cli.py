import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from rich import print as rprint
from rich.markdown import Markdown
from rich.prompt import Prompt

from .analyzer import analyze_symptoms
from .chat import ChatSession
from .config import load_settings
from .questions import generate_follow_up_questions
from .referrals import build_referrals

EXIT_WORDS = {"quit", "exit", "q"}


def setup_logging(verbose: bool, default_level: str = "INFO") -> None:
    """Configure logging based on verbosity level."""
    log_level = logging.DEBUG if verbose else getattr(logging, default_level)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_results(text: str) -> Dict[str, Any]:
    analysis = analyze_symptoms(text)
    return {
        "input": text,
        "analysis": analysis.model_dump(mode="json", by_alias=True),
        "follow_up_questions": generate_follow_up_questions(analysis.identified_symptoms),
        "referrals": [
            referral.model_dump(mode="json", by_alias=True)
            for referral in build_referrals(analysis.recommended_specialties)
        ],
    }


def save_results(
    results: Dict[str, Any],
    output_format: Literal["json", "markdown"],
    output_file: str
) -> None:
    """Save results to a file in the specified format."""
    logger = logging.getLogger(__name__)
    output_path = Path(output_file)

    logger.info(f"Saving results to {output_path} in {output_format} format")

    if output_format == "json":
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
    elif output_format == "markdown":
        analysis = results["analysis"]
        with open(output_path, "w", encoding="utf-8") as f:
            f.write("# Symptom Analysis Report\n\n")
            f.write(f"**Input:** {results['input']}\n\n")
            f.write(f"**Urgency:** {analysis['urgencyLevel'].upper()}\n\n")
            f.write(f"{analysis['advice']}\n\n")

            f.write("## Identified Symptoms\n")
            for symptom in analysis["identifiedSymptoms"]:
                f.write(f"- {symptom['name']} ({symptom['category']}, {symptom['severity']})\n")
            f.write("\n")

            f.write("## Possible Conditions\n")
            for condition in analysis["possibleConditions"]:
                f.write(f"### {condition['name']}\n{condition['description']}\n\n")
                if condition["whenToSeekCare"]:
                    f.write(f"_When to seek care:_ {condition['whenToSeekCare']}\n\n")

            f.write("## Recommended Specialists\n")
            for referral in results["referrals"]:
                f.write(f"- [{referral['name']}]({referral['searchPath']})\n")
            f.write("\n")

            f.write("## Follow-up Questions\n")
            for index, question in enumerate(results["follow_up_questions"], 1):
                f.write(f"{index}. {question}\n")
    else:
        raise ValueError(f"Unsupported output format: {output_format}")

    logger.info(f"Results saved to {output_path}")


def run_chat(session: Optional[ChatSession] = None) -> ChatSession:
    """Interactive loop over a chat session until an exit word or EOF."""
    session = session or ChatSession(settings=load_settings())
    rprint(Markdown(session.messages[0].content))
    while True:
        try:
            text = Prompt.ask("[bold cyan]You[/bold cyan]")
        except (EOFError, KeyboardInterrupt):
            break
        if text.strip().lower() in EXIT_WORDS:
            break
        reply = session.send(text)
        if reply is None:
            continue
        rprint(Markdown(reply.content))
        if reply.analysis is not None:
            rprint(f"[bold]{reply.analysis.urgency_level.value.upper()} PRIORITY[/bold]")
            for referral in build_referrals(reply.analysis.recommended_specialties):
                rprint(f"  Find {referral.name}: {referral.search_path}")
    return session


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Rule-based symptom triage.")
    parser.add_argument("--text", help="Symptom description. Omit to start an interactive chat.")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "--output-format",
        choices=["json", "markdown"],
        help="Format for saving results (json or markdown)"
    )
    parser.add_argument(
        "--save-results",
        help="Path to save the results file"
    )
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(args.verbose, settings.log_level)

    logger = logging.getLogger(__name__)

    if args.text is None:
        logger.info("Starting interactive symptom chat")
        run_chat(ChatSession(settings=settings))
        return

    logger.info("Analyzing symptom description")
    logger.debug(f"Input text length: {len(args.text)} characters")
    results = build_results(args.text)

    # Always display results in terminal
    rprint(results)

    if args.output_format and args.save_results:
        save_results(results, args.output_format, args.save_results)


if __name__ == "__main__":
    main()
