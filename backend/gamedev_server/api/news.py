from flask import Blueprint, jsonify, request


def create_news_blueprint(service):
    news = Blueprint('news', __name__)

    @news.route('/postNews/', methods=['POST'])
    def post_news():
        data = request.get_json(silent=True) or {}
        return jsonify(service.post_news(data))

    @news.route('/getNews/', methods=['GET'])
    def get_news():
        # Optional ?limit=N, capped by NEWS_PAGE_LIMIT
        limit = request.args.get('limit', type=int)
        if limit is not None and limit < 1:
            limit = None
        return jsonify([post.to_dict() for post in service.list_news(limit=limit)])

    @news.route('/deleteNews/', methods=['POST'])
    def delete_news():
        data = request.get_json(silent=True) or {}
        return jsonify(service.delete_news(data))

    return news
