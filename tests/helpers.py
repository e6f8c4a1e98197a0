"""HTML fixtures shared across test modules."""


def build_page(
    title="Cannon Street Gym | Nuffield Health",
    h1="Cannon Street Fitness & Wellbeing Gym",
    description="",
    body="",
    images=0,
    image_attrs="",
    links="",
    head_extra="",
):
    """Assemble a small gym landing page.

    ``images`` plain club photos are appended as /media/club-N.jpg with any
    extra ``image_attrs`` applied to each.
    """
    imgs = "\n".join(
        f'<img src="/media/club-{i}.jpg" alt="Club photo {i}" {image_attrs}>'
        for i in range(images)
    )
    return f"""
    <html>
      <head>
        <title>{title}</title>
        <meta name="description" content="{description}">
        {head_extra}
      </head>
      <body>
        <nav>{links}</nav>
        <h1>{h1}</h1>
        <p>{body}</p>
        {imgs}
      </body>
    </html>
    """
