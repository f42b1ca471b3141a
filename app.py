# app.py
import logging
import os

from flask import Flask, jsonify, request

from helpers.console import ConsoleTicker
from reroute.approval import InvalidTransitionError, ProposalNotFoundError
from reroute.emergency import Scenario, UnknownScenarioError
from reroute.ingestion import FeedConfigurationError, FlightFeedClient
from reroute.simulation import ConsoleConfig, ConsoleController

def create_app(config=None, controller=None):
    """
    Builds the console service around one controller. The controller owns
    all flight state; every route answers from a fresh snapshot.
    """
    config = config or ConsoleConfig.from_env()
    app = Flask(__name__)

    # Per-app state shared by the routes below
    state = {
        'config': config,
        'controller': controller or ConsoleController(config),
        'feed_client': None
    }
    app.config['CONSOLE_STATE'] = state

    def get_feed_client():
        if state['feed_client'] is None:
            state['feed_client'] = FlightFeedClient(
                config.feed_base_url,
                config.feed_api_key,
                timeout=config.feed_timeout_sec,
                cache_enabled=config.feed_cache_enabled
            )
        return state['feed_client']

    # --- Error mapping ---

    @app.errorhandler(UnknownScenarioError)
    def unknown_scenario(e):
        return jsonify({'error': str(e), 'scenario': e.scenario_id}), 400

    @app.errorhandler(ProposalNotFoundError)
    def proposal_not_found(e):
        return jsonify({'error': str(e), 'proposalId': e.proposal_id}), 404

    @app.errorhandler(InvalidTransitionError)
    def invalid_transition(e):
        return jsonify({'error': str(e), 'action': e.action, 'state': e.state}), 409

    @app.errorhandler(FeedConfigurationError)
    def feed_not_configured(e):
        logging.warning(f"Live feed refresh refused: {e}")
        return jsonify({'error': str(e), 'setting': e.setting}), 503

    # --- Read side ---

    @app.route('/state')
    def console_state():
        return jsonify(state['controller'].snapshot())

    @app.route('/flights')
    def flights():
        return jsonify(state['controller'].snapshot()['flights'])

    @app.route('/conditions')
    def conditions():
        return jsonify(state['controller'].snapshot()['conditions'])

    @app.route('/proposals')
    def proposals():
        snapshot = state['controller'].snapshot()
        return jsonify({'locked': snapshot['locked'], 'proposals': snapshot['proposals']})

    @app.route('/scenarios')
    def scenarios():
        active = state['controller'].snapshot()['scenario']
        return jsonify([
            {
                'id': s.value,
                'name': s.profile.name,
                'description': s.profile.description,
                'waypoint': s.profile.waypoint,
                'active': s.value == active
            }
            for s in Scenario
        ])

    # --- Operator actions ---

    @app.route('/scenario', methods=['POST'])
    def set_scenario():
        data = request.get_json(silent=True) or {}
        scenario_id = data.get('scenario')
        if scenario_id is None:
            return jsonify({'error': 'scenario is required.'}), 400
        scenario = state['controller'].on_scenario_change(scenario_id)
        logging.info(f"Operator selected scenario '{scenario.value}'")
        return jsonify(state['controller'].snapshot())

    @app.route('/approve', methods=['POST'])
    def approve():
        frozen_ids = state['controller'].on_approve_all()
        return jsonify({'frozen': frozen_ids, 'state': state['controller'].snapshot()})

    @app.route('/reject', methods=['POST'])
    def reject():
        data = request.get_json(silent=True) or {}
        proposal_id = data.get('proposalId') or data.get('proposal_id')
        if not proposal_id:
            return jsonify({'error': 'proposalId is required.'}), 400
        removed = state['controller'].on_reject(proposal_id)
        return jsonify({'rejected': removed.id, 'proposals': state['controller'].snapshot()['proposals']})

    @app.route('/tick', methods=['POST'])
    def tick():
        moved = state['controller'].on_tick()
        return jsonify({'moved': moved, 'state': state['controller'].snapshot()})

    @app.route('/ingest', methods=['POST'])
    def ingest():
        payload = request.get_json(silent=True)
        if payload is None:
            return jsonify({'error': 'A JSON body is required.'}), 400
        count = state['controller'].on_ingest(payload)
        return jsonify({'ingested': count, 'state': state['controller'].snapshot()})

    @app.route('/refresh', methods=['POST'])
    def refresh():
        data = request.get_json(silent=True) or {}
        items = get_feed_client().fetch(data.get('params'))
        count = state['controller'].on_ingest(items)
        return jsonify({'received': len(items), 'ingested': count, 'state': state['controller'].snapshot()})

    return app

def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    log = logging.getLogger('werkzeug')
    log.setLevel(logging.WARNING)

    app = create_app()
    console_state = app.config['CONSOLE_STATE']
    interval = console_state['config'].tick_interval_sec
    ticker = ConsoleTicker(console_state['controller'], interval)
    ticker.start()
    try:
        app.run(host=os.getenv('REROUTE_HOST', '127.0.0.1'), port=int(os.getenv('REROUTE_PORT', '5000')),
                debug=True, use_reloader=False)
    finally:
        ticker.stop()
        ticker.join(timeout=interval + 5)
        if ticker.is_alive():
            logging.warning("Console ticker did not stop within the shutdown timeout.")

if __name__ == '__main__':
    main()
