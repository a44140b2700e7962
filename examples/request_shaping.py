"""
Example: Shaping a request before dispatch

Shows how a chat client asks the resolver what to send: the prompt text
(with web search results folded in), which images to attach, whether to
expose tools and how long to wait.
"""

from chat_policy_sdk import RequestMessage, ServiceProvider, plan_request, show_plugins


def main():
    message = RequestMessage.model_validate({
        "role": "user",
        "content": [
            {"type": "text", "text": "Summarize today's news about this chart."},
            {"type": "image_url", "image_url": {"url": "https://example.com/chart.png"}},
        ],
        "webSearchReferences": {
            "results": [
                {
                    "title": "Markets close higher",
                    "url": "https://example.com/markets",
                    "content": "Stocks rallied on Friday...",
                },
            ],
        },
    })

    for model, provider in [
        ("gpt-4o", ServiceProvider.OPENAI),
        ("gpt-3.5-turbo", ServiceProvider.OPENAI),
        ("claude-3-7-sonnet-latest", ServiceProvider.ANTHROPIC),
        ("deepseek-reasoner", ServiceProvider.DEEPSEEK),
    ]:
        plan = plan_request(message, model, provider=provider, lang="en")
        print(f"=== {model} ===")
        print(f"images attached: {plan.images}")
        print(f"tools enabled:   {plan.enable_tools}")
        print(f"rag requested:   {plan.use_rag}")
        print(f"thinking mode:   {plan.capabilities.claude_thinking}")
        print(f"timeout:         {plan.timeout_ms} ms ({plan.timeout_budget.value})")
        print(f"plugins shown:   {show_plugins(provider, model)}")
        print(f"prompt preview:  {plan.text[:80]!r}...")
        print()


if __name__ == "__main__":
    main()
