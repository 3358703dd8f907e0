from flask import Flask, request, jsonify
import logging
import os

from maze_pathfinder import MazeProblem, NoSolution, check_solution, solve
from maze_pathfinder.cli import env_log_level

app = Flask(__name__)

LOG_LEVEL = env_log_level()
MAX_CELLS = int(os.environ.get('MAZE_PATHFINDER_MAX_CELLS', '250000'))

app.logger.setLevel(LOG_LEVEL)


def problem_from_payload(data) -> MazeProblem:
    """Build a MazeProblem from a request body.
    Accepts {"maze": ["XXXX", ...]} or {"maze": "XXXX\\n..."}.
    """
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    maze = data.get('maze')
    if isinstance(maze, str):
        rows = [line.strip() for line in maze.splitlines() if line.strip()]
    elif isinstance(maze, list) and all(isinstance(r, str) for r in maze):
        rows = [line.strip() for line in maze if line.strip()]
    else:
        raise ValueError("maze must be a string or a list of strings")

    cells = sum(len(r) for r in rows)
    if cells > MAX_CELLS:
        raise ValueError(f"maze too large ({cells} cells, limit {MAX_CELLS})")
    return MazeProblem(rows)


def parse_actions(data) -> list[str]:
    actions = data.get('actions')
    if not isinstance(actions, list) or not all(isinstance(a, str) for a in actions):
        raise ValueError("actions must be a list of strings")
    return actions


@app.get('/api/health')
def api_health():
    return jsonify({'status': 'ok'})


@app.post('/api/solve')
def api_solve():
    try:
        problem = problem_from_payload(request.get_json(force=True, silent=True))
    except ValueError as e:
        app.logger.warning('solve rejected: %s', e)
        return jsonify({'status': 'error', 'message': str(e)}), 400

    try:
        actions = solve(problem)
    except NoSolution as e:
        return jsonify({'status': 'no_solution', 'actions': None, 'expanded': e.expanded})
    return jsonify({'status': 'ok', 'actions': actions, 'cost': len(actions)})


@app.post('/api/verify')
def api_verify():
    try:
        data = request.get_json(force=True, silent=True)
        problem = problem_from_payload(data)
        actions = parse_actions(data)
    except ValueError as e:
        app.logger.warning('verify rejected: %s', e)
        return jsonify({'status': 'error', 'message': str(e)}), 400

    check = check_solution(problem, actions)
    return jsonify({
        'status': 'ok',
        'is_solution': check.is_solution,
        'cost': check.cost,
        'failed_at': check.failed_at,
    })


if __name__ == '__main__':
    logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
    app.run(debug=True)
