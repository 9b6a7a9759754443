from kubectl_mtv_mcp.mcp_servers.common.errors import CommandNotFoundError, NonZeroExitError
from kubectl_mtv_mcp.mcp_servers.common.namespace import FALLBACK_NAMESPACE, NamespaceResolver

QUERY = ["kubectl", "config", "view", "--minify", "--output", "jsonpath={..namespace}"]


def test_explicit_namespace_spawns_nothing(runner):
    assert NamespaceResolver(runner).resolve("team-a") == "team-a"
    assert runner.calls == []


def test_current_context_namespace_is_trimmed(runner):
    runner.respond("kubectl", "  team-b \n")
    assert NamespaceResolver(runner).resolve() == "team-b"
    assert runner.calls == [QUERY]


def test_empty_output_falls_back_to_default(runner):
    runner.respond("kubectl", "", "   \n")
    resolver = NamespaceResolver(runner)
    assert resolver.resolve("") == FALLBACK_NAMESPACE == "default"
    assert resolver.resolve(None) == "default"


def test_kubectl_failure_falls_back_to_default(runner):
    runner.respond(
        "kubectl",
        NonZeroExitError("kubectl", QUERY, 1, stderr="no context"),
        CommandNotFoundError("kubectl", QUERY, "not found"),
    )
    resolver = NamespaceResolver(runner)
    assert resolver.resolve() == "default"
    assert resolver.resolve() == "default"


def test_lookup_is_not_cached(runner):
    runner.respond("kubectl", "one", "two")
    resolver = NamespaceResolver(runner)
    assert resolver.resolve() == "one"
    assert resolver.resolve() == "two"
    assert len(runner.calls) == 2


def test_custom_kubectl_binary(runner):
    NamespaceResolver(runner, kubectl_bin="oc").resolve()
    assert runner.last[0] == "oc"
