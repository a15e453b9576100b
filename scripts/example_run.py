import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.default_engine import DefaultRulesEngine  # noqa: E402  - local path injection happens above
from core.logging_config import setup_logging  # noqa: E402
from rules import Facts, RuleBuilder, RuleListener, Rules, RulesEngineParameters  # noqa: E402

class PrintingListener(RuleListener):
    def __init__(self, logger):
        self._logger = logger

    def on_success(self, rule, facts):
        self._logger.info("Rule '%s' applied, facts=%s", rule.name, facts)

    def on_failure(self, rule, facts, exception):
        self._logger.info("Rule '%s' failed: %s", rule.name, exception)

def main():
    logger = setup_logging()
    facts = Facts({"temperature": 31, "rain": False})

    rules = Rules(
        RuleBuilder()
        .name("heatwave")
        .description("warn when it is too hot")
        .priority(1)
        .when(lambda f: f.get("temperature", 0) > 30)
        .then(lambda f: f.put("advice", "stay inside"))
        .build(),
        RuleBuilder()
        .name("umbrella")
        .description("take an umbrella when it rains")
        .priority(2)
        .when(lambda f: f.get("rain") is True)
        .then(lambda f: f.put("advice", "take an umbrella"))
        .build(),
    )

    engine = DefaultRulesEngine(RulesEngineParameters(skip_on_first_applied_rule=True))
    engine.add_rule_listener(PrintingListener(logger))
    engine.fire(rules, facts)
    logger.info("Checked: %s", {rule.name: result for rule, result in engine.check(rules, facts).items()})
    logger.info("Advice=%s", facts.get("advice"))

if __name__ == "__main__":
    main()
