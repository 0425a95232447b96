"""
Pact contract tests for the status exchange.

Modules:
    test_status_consumer_contract: records the consumer's expectations and checks them against pacts/
    test_provider_verification: replays pacts/ against a live responder
    participants: participant names, provider state and contract paths
    conftest: markers and the live responder fixture
"""
