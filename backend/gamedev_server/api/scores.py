from flask import Blueprint, jsonify, request


def create_scores_blueprint(service):
    scores = Blueprint('scores', __name__)

    @scores.route('/postScore/', methods=['POST'])
    def post_score():
        data = request.get_json(silent=True) or {}
        return jsonify(service.post_score(data))

    @scores.route('/getScores/', methods=['GET'])
    def get_scores():
        return jsonify([entry.to_dict() for entry in service.get_top_scores()])

    @scores.route('/deleteScore/', methods=['POST'])
    def delete_score():
        data = request.get_json(silent=True) or {}
        return jsonify(service.delete_score(data))

    return scores
